import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.rate_limit import limiter
from app.database.json_store import RecordStore
from app.database.store_client import get_store
from app.main import app


@pytest.fixture(autouse=True)
def disable_rate_limits():
    original = limiter.enabled
    limiter.enabled = False
    try:
        yield
    finally:
        limiter.enabled = original


@pytest.fixture
def store(tmp_path):
    record_store = RecordStore(tmp_path)
    record_store.load()
    return record_store


@pytest.fixture
def override_store(store):
    app.dependency_overrides[get_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_store, None)


@pytest_asyncio.fixture
async def api_client(override_store):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def register_user(api_client):
    """Register a user and return (user, auth headers)."""
    counter = {"n": 0}

    async def _register(name: str = None, email: str = None, password: str = "secret123"):
        counter["n"] += 1
        name = name or f"User {counter['n']}"
        email = email or f"user{counter['n']}@example.com"
        resp = await api_client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return body["user"], {"Authorization": f"Bearer {body['access_token']}"}

    return _register
