import pytest


@pytest.fixture
def register_caregiver(api_client):
    async def _register(headers, **overrides):
        payload = {
            "name": "Mei",
            "phone": "+65 5555 0000",
            "email": "mei@example.com",
            "bio": "Ten years of elderly care",
            "services": ["Elderly care", "Companionship"],
            "hourly_rate": 25,
            "availability": "Weekdays",
            "location": {"area": "Bishan", "lat": 1.3521, "lng": 103.8198},
            "experience": "10 years",
        }
        payload.update(overrides)
        resp = await api_client.post("/api/caregivers/register", headers=headers, json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _register


async def test_register_caregiver_defaults(api_client, register_user, register_caregiver):
    user, headers = await register_user()
    caregiver = await register_caregiver(headers)
    assert caregiver["user_id"] == user["id"]
    assert caregiver["rating"] == 0
    assert caregiver["reviews"] == 0
    assert caregiver["verified"] is False
    assert caregiver["updates"] == []


async def test_register_requires_auth(api_client):
    resp = await api_client.post("/api/caregivers/register", json={"name": "Mei"})
    assert resp.status_code == 401


async def test_list_filters(api_client, register_user, register_caregiver):
    _, headers = await register_user()
    await register_caregiver(headers, name="Mei")
    await register_caregiver(
        headers, name="Raj", services=["Child care"], location={"area": "Tampines", "lat": 1.35, "lng": 103.94}
    )

    by_area = await api_client.get("/api/caregivers", params={"area": "bish"})
    assert [c["name"] for c in by_area.json()] == ["Mei"]

    by_service = await api_client.get("/api/caregivers", params={"service": "child"})
    assert [c["name"] for c in by_service.json()] == ["Raj"]

    by_rating = await api_client.get("/api/caregivers", params={"min_rating": 4})
    assert by_rating.json() == []


async def test_get_unknown_caregiver(api_client):
    resp = await api_client.get("/api/caregivers/missing")
    assert resp.status_code == 404


async def test_update_by_owner_only(api_client, register_user, register_caregiver):
    _, owner = await register_user()
    _, stranger = await register_user()
    caregiver = await register_caregiver(owner)

    resp = await api_client.put(f"/api/caregivers/{caregiver['id']}", headers=owner, json={"hourly_rate": 30})
    assert resp.status_code == 200
    assert resp.json()["hourly_rate"] == 30
    assert resp.json()["name"] == "Mei"

    denied = await api_client.put(f"/api/caregivers/{caregiver['id']}", headers=stranger, json={"hourly_rate": 1})
    assert denied.status_code == 403


async def test_updates_feed_newest_first(api_client, register_user, register_caregiver):
    _, owner = await register_user()
    _, stranger = await register_user()
    caregiver = await register_caregiver(owner)

    for message in ("First", "Second"):
        resp = await api_client.post(
            f"/api/caregivers/{caregiver['id']}/updates", headers=owner, json={"message": message}
        )
        assert resp.status_code == 201

    denied = await api_client.post(
        f"/api/caregivers/{caregiver['id']}/updates", headers=stranger, json={"message": "spam"}
    )
    assert denied.status_code == 403

    fetched = await api_client.get(f"/api/caregivers/{caregiver['id']}")
    assert [u["message"] for u in fetched.json()["updates"]] == ["Second", "First"]


async def test_contact_returns_details(api_client, register_user, register_caregiver):
    _, owner = await register_user()
    _, seeker = await register_user()
    caregiver = await register_caregiver(owner)
    resp = await api_client.post(f"/api/caregivers/{caregiver['id']}/contact", headers=seeker)
    assert resp.status_code == 200
    assert resp.json()["contact"] == {"name": "Mei", "phone": "+65 5555 0000", "email": "mei@example.com"}


async def test_nearby_sorted_and_limited(api_client, register_user, register_caregiver):
    _, headers = await register_user()
    await register_caregiver(headers, name="Near", location={"area": "A", "lat": 1.3530, "lng": 103.8200})
    await register_caregiver(headers, name="Nearer", location={"area": "B", "lat": 1.3521, "lng": 103.8198})
    await register_caregiver(headers, name="Far", location={"area": "C", "lat": 1.45, "lng": 103.82})

    resp = await api_client.get("/api/caregivers/nearby/1.3521/103.8198")
    body = resp.json()
    assert [c["name"] for c in body] == ["Nearer", "Near"]
    assert body[0]["distance_km"] == 0

    wider = await api_client.get("/api/caregivers/nearby/1.3521/103.8198", params={"radius": 20})
    assert [c["name"] for c in wider.json()] == ["Nearer", "Near", "Far"]
