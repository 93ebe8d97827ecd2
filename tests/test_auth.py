
def test_register_and_login(client, register_user):
    register_user("jane", email="Jane@Example.com")

    r = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "secret123"})
    assert r.status_code == 200, r.data
    data = r.get_json()["data"]
    assert data["user"]["username"] == "jane"
    assert data["token"]


def test_register_rejects_duplicates_and_short_password(client, register_user):
    register_user("jane")

    r = client.post("/api/auth/register", json={
        "username": "jane", "email": "jane@example.com", "password": "secret123",
    })
    assert r.status_code == 400
    details = r.get_json()["error"]["details"]
    assert "email" in details
    assert "username" in details

    r = client.post("/api/auth/register", json={
        "username": "bob", "email": "bob@example.com", "password": "short",
    })
    assert r.status_code == 400
    assert "password" in r.get_json()["error"]["details"]


def test_login_wrong_password(client, register_user):
    register_user("jane")
    r = client.post("/api/auth/login", json={"email": "jane@example.com", "password": "wrong-pass"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "INVALID_CREDENTIALS"


def test_invalid_token(client):
    r = client.get("/api/users/profile", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.get_json()["success"] is False


def test_profile_roundtrip(client, user):
    _, headers = user
    r = client.put("/api/users/profile", headers=headers, json={
        "first_name": "Demo", "height_cm": 175, "current_weight_kg": 72.5, "activity_level": "very_active",
    })
    assert r.status_code == 200, r.data

    r = client.get("/api/users/profile", headers=headers)
    profile = r.get_json()["data"]
    assert profile["first_name"] == "Demo"
    assert profile["current_weight_kg"] == 72.5

    r = client.post("/api/auth/logout", headers=headers)
    assert r.status_code == 200


def test_health_and_unknown_route(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["data"]["database"] == "healthy"

    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"
