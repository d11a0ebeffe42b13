"""Tests for app-level wiring: health, lessons, error responses."""


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Backend is running successfully!"}
    assert client.get("/health").json() == {"status": "ok"}


def test_lessons(client):
    body = client.get("/lessons").json()
    assert set(body) == {"firstSemester", "secondSemester"}
    assert "Ethics" in body["firstSemester"]


def test_unknown_route_uses_error_shape(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_malformed_body_is_a_400(client):
    resp = client.post("/notes/abc/comments", json={"author": "a", "content": "b"})
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_request_id_header(client):
    resp = client.get("/health")
    assert len(resp.headers["X-Request-ID"]) == 12
