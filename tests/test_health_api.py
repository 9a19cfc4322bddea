from progress_api import create_app


def make_client():
    app = create_app({"TESTING": True})
    return app.test_client()


def test_get_missing_health_is_404():
    client = make_client()
    r = client.get("/api/health/u1")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Health not found"}


def test_init_creates_then_returns_existing():
    client = make_client()
    r = client.post("/api/health/u1/init")
    assert r.status_code == 201
    assert r.get_json() == {"userId": "u1", "health": 100, "maxHealth": 100}
    r = client.post("/api/health/u1/init")
    assert r.status_code == 200
    assert r.get_json() == {"userId": "u1", "health": 100, "maxHealth": 100}
    r = client.get("/api/health/u1")
    assert r.status_code == 200


def test_update_merges_max_health():
    client = make_client()
    r = client.put("/api/health/u1", json={"health": 40})
    assert r.status_code == 200
    assert r.get_json() == {"userId": "u1", "health": 40, "maxHealth": 100}
    r = client.put("/api/health/u1", json={"health": 120, "maxHealth": 110})
    assert r.get_json() == {"userId": "u1", "health": 120, "maxHealth": 110}
    r = client.put("/api/health/u1", json={"health": 5})
    assert r.get_json()["maxHealth"] == 110
    assert client.get("/api/health/u1").get_json()["health"] == 5


def test_update_rejects_non_numeric_health():
    client = make_client()
    client.put("/api/health/u1", json={"health": 60})
    r = client.put("/api/health/u1", json={"health": "high"})
    assert r.status_code == 400
    assert r.get_json() == {"error": "health must be a number"}
    assert client.get("/api/health/u1").get_json()["health"] == 60


def test_update_with_unparseable_body():
    client = make_client()
    r = client.put("/api/health/u1", data="{not json", content_type="application/json")
    assert r.status_code == 400
    assert client.get("/api/health/u1").status_code == 404


def test_non_finite_literals_rejected():
    client = make_client()
    client.put("/api/health/u1", json={"health": 60})
    for body in ('{"health": Infinity}', '{"health": NaN}', '{"health": 1, "maxHealth": -Infinity}'):
        r = client.put("/api/health/u1", data=body, content_type="application/json")
        assert r.status_code == 400
    assert client.get("/api/health/u1").get_json() == {"userId": "u1", "health": 60, "maxHealth": 100}


def test_snake_case_max_health_ignored():
    client = make_client()
    client.put("/api/health/u1", json={"health": 50, "maxHealth": 80})
    r = client.put("/api/health/u1", json={"health": 10, "max_health": 5})
    assert r.get_json()["maxHealth"] == 80
