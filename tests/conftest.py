import pytest


@pytest.fixture(autouse=True)
def isolated_settings_dir(tmp_path, monkeypatch):
    """Keep settings reads/writes inside a temporary app dir."""
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    yield tmp_path / "appdata"
