from progress_api import create_app


def make_client():
    return create_app({"TESTING": True}).test_client()


def test_missing_progress_is_404():
    r = make_client().get("/api/completion/u1")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Progress not found"}


def test_progress_sequence():
    client = make_client()
    r = client.post("/api/completion/u1", json={"currentLevel": 5})
    assert r.status_code == 200
    assert r.get_json() == {"userId": "u1", "currentLevel": 5, "highestLevelCompleted": 5}

    r = client.post("/api/completion/u1", json={"currentLevel": 2})
    assert r.get_json() == {"userId": "u1", "currentLevel": 2, "highestLevelCompleted": 5}

    r = client.post("/api/completion/u1", json={"currentLevel": 2, "highestLevelCompleted": 1})
    assert r.get_json() == {"userId": "u1", "currentLevel": 2, "highestLevelCompleted": 1}

    r = client.get("/api/completion/u1")
    assert r.status_code == 200
    assert r.get_json()["highestLevelCompleted"] == 1


def test_missing_current_level():
    client = make_client()
    client.post("/api/completion/u1", json={"currentLevel": 4})
    r = client.post("/api/completion/u1", json={"highestLevelCompleted": 9})
    assert r.status_code == 400
    assert r.get_json() == {"error": "currentLevel must be a number"}
    assert client.get("/api/completion/u1").get_json()["highestLevelCompleted"] == 4


def test_non_finite_literals():
    client = make_client()
    r = client.post("/api/completion/u1", data='{"currentLevel": NaN}', content_type="application/json")
    assert r.status_code == 400
    r = client.post(
        "/api/completion/u1",
        data='{"currentLevel": 3, "highestLevelCompleted": Infinity}',
        content_type="application/json",
    )
    assert r.status_code == 200
    assert r.get_json() == {"userId": "u1", "currentLevel": 3, "highestLevelCompleted": 3}
