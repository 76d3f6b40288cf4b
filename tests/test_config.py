import json
import os

from passbench.config import DEFAULTS, config_path, load_config, save_config


def test_defaults_when_missing():
    assert load_config() == DEFAULTS


def test_path_uses_appdata(isolated_settings_dir):
    p = config_path()
    assert p == os.path.join(str(isolated_settings_dir), "PassBench", "config.json")
    assert os.path.isdir(os.path.dirname(p))


def test_save_and_merge():
    save_config({"default_length": 42, "ui": "gui"})
    cfg = load_config()
    assert cfg["default_length"] == 42
    assert cfg["ui"] == "gui"
    # untouched keys come from defaults
    assert cfg["use_digits"] is DEFAULTS["use_digits"]


def test_corrupt_file_falls_back():
    with open(config_path(), "w", encoding="utf-8") as f:
        f.write("{not json")
    assert load_config() == DEFAULTS


def test_non_object_falls_back():
    with open(config_path(), "w", encoding="utf-8") as f:
        json.dump([1, 2, 3], f)
    assert load_config() == DEFAULTS


def test_unicode_round_trip():
    save_config({"note": "пароль"})
    with open(config_path(), encoding="utf-8") as f:
        assert "пароль" in f.read()
