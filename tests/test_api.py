import pytest

from passbench.api import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_home(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "running" in resp.get_json()["message"]


def test_generate_defaults(client):
    resp = client.post("/generate", json={})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["length"] == 16
    assert len(body["password"]) == 16


def test_generate_cyrillic_with_required(client):
    resp = client.post("/generate", json={
        "length": 40, "latin": False, "cyrillic": True, "digits": False,
        "special": False, "required": "7",
    })
    assert resp.status_code == 200
    pw = resp.get_json()["password"]
    assert len(pw) == 40
    assert "7" in pw
    assert all(c == "7" or "а" <= c.lower() <= "я" for c in pw)


def test_generate_bad_length(client):
    resp = client.post("/generate", json={"length": 0})
    assert resp.status_code == 400
    assert "positive" in resp.get_json()["error"]


def test_generate_no_classes(client):
    resp = client.post("/generate", json={"latin": False, "digits": False, "special": False})
    assert resp.status_code == 400
    assert "no character class" in resp.get_json()["error"]


def test_benchmark_custom(client):
    resp = client.post("/benchmark", json={"mode": "custom", "min": 100, "max": 200, "step": 50})
    assert resp.status_code == 200
    report = resp.get_json()["report"]
    assert "CUSTOM TEST (100-200, step 50)" in report


def test_benchmark_custom_missing_fields(client):
    resp = client.post("/benchmark", json={"mode": "custom", "min": 100})
    assert resp.status_code == 400


def test_benchmark_custom_bad_range(client):
    resp = client.post("/benchmark", json={"mode": "custom", "min": 100, "max": 10, "step": 5})
    assert resp.status_code == 400
    assert "greater than maximum" in resp.get_json()["error"]


def test_benchmark_unknown_mode(client):
    resp = client.post("/benchmark", json={"mode": "turbo"})
    assert resp.status_code == 400


def test_generate_rejects_non_object_body(client):
    resp = client.post("/generate", json=[1])
    assert resp.status_code == 400
    assert "JSON object" in resp.get_json()["error"]


def test_benchmark_rejects_non_object_body(client):
    resp = client.post("/benchmark", json="quick")
    assert resp.status_code == 400


def test_generate_flags_must_be_booleans(client):
    resp = client.post("/generate", json={"latin": "false"})
    assert resp.status_code == 400
    assert "'latin' must be true or false" in resp.get_json()["error"]


def test_generate_false_flag_disables_class(client):
    resp = client.post("/generate", json={"length": 30, "latin": False, "special": False})
    assert resp.status_code == 200
    assert resp.get_json()["password"].isdigit()
