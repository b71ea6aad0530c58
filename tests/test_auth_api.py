async def test_register_returns_token_and_public_user(api_client):
    resp = await api_client.post(
        "/api/auth/register",
        json={"name": "Ada", "email": "Ada@Example.com", "password": "secret123"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"]
    assert body["user"]["email"] == "ada@example.com"
    assert "password_hash" not in body["user"]
    assert "waves" not in body["user"]


async def test_register_duplicate_email_conflicts(api_client, register_user):
    await register_user(email="dup@example.com")
    resp = await api_client.post(
        "/api/auth/register",
        json={"name": "Again", "email": "DUP@example.com", "password": "secret123"},
    )
    assert resp.status_code == 409
    assert resp.json() == {"message": "User already exists"}


async def test_register_rejects_short_password(api_client):
    resp = await api_client.post(
        "/api/auth/register",
        json={"name": "Ada", "email": "ada@example.com", "password": "123"},
    )
    assert resp.status_code == 400
    assert "password" in resp.json()["message"]


async def test_register_rejects_invalid_email(api_client):
    resp = await api_client.post(
        "/api/auth/register",
        json={"name": "Ada", "email": "not-an-email", "password": "secret123"},
    )
    assert resp.status_code == 400


async def test_login_round_trip(api_client, register_user):
    await register_user(email="login@example.com", password="pw123456")
    resp = await api_client.post("/api/auth/login", json={"email": "login@example.com", "password": "pw123456"})
    assert resp.status_code == 200
    token = resp.json()["access_token"]

    me = await api_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "login@example.com"


async def test_login_wrong_password(api_client, register_user):
    await register_user(email="login@example.com")
    resp = await api_client.post("/api/auth/login", json={"email": "login@example.com", "password": "wrong-pass"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid email or password"}


async def test_login_unknown_email(api_client):
    resp = await api_client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "secret123"})
    assert resp.status_code == 401


async def test_me_requires_token(api_client):
    resp = await api_client.get("/api/auth/me")
    assert resp.status_code == 401


async def test_me_rejects_garbage_token(api_client):
    resp = await api_client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


async def test_health_and_ready(api_client):
    assert (await api_client.get("/health")).json() == {"status": "healthy"}
    ready = await api_client.get("/ready")
    assert ready.status_code == 200
    assert ready.json()["collections"]["users"] == 0
