from app.database.json_store import RecordStore


async def test_get_user_profile(api_client, register_user):
    user, _ = await register_user(name="Ada")
    resp = await api_client.get(f"/api/users/{user['id']}")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Ada"


async def test_get_unknown_user(api_client):
    resp = await api_client.get("/api/users/missing")
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


async def test_update_own_profile(api_client, register_user, store):
    user, headers = await register_user()
    resp = await api_client.put(
        f"/api/users/{user['id']}",
        headers=headers,
        json={
            "bio": "Likes walks",
            "age": 31,
            "interests": ["hiking", "hiking", "chess"],
            "location": {"lat": 1.35, "lng": 103.8, "address": "Singapore"},
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["interests"] == ["hiking", "chess"]
    assert body["location"]["lat"] == 1.35
    assert body["updated_at"] is not None
    assert store.users.get(user["id"]).age == 31


async def test_update_ignores_disallowed_fields(api_client, register_user, store):
    user, headers = await register_user(email="keep@example.com")
    resp = await api_client.put(
        f"/api/users/{user['id']}",
        headers=headers,
        json={"email": "hijack@example.com", "password_hash": "x", "bio": "hi"},
    )
    assert resp.status_code == 200
    stored = store.users.get(user["id"])
    assert stored.email == "keep@example.com"
    assert stored.password_hash != "x"


async def test_update_other_profile_forbidden(api_client, register_user):
    other, _ = await register_user()
    _, headers = await register_user()
    resp = await api_client.put(f"/api/users/{other['id']}", headers=headers, json={"bio": "hacked"})
    assert resp.status_code == 403


async def test_update_requires_auth(api_client, register_user):
    user, _ = await register_user()
    resp = await api_client.put(f"/api/users/{user['id']}", json={"bio": "x"})
    assert resp.status_code == 401


async def test_user_events_and_communities(api_client, register_user):
    user, headers = await register_user()
    event = await api_client.post(
        "/api/events",
        headers=headers,
        json={"title": "Walk", "description": "Morning", "date": "2030-01-01", "location": "Park"},
    )
    assert event.status_code == 201
    community = await api_client.post(
        "/api/communities",
        headers=headers,
        json={"name": "Walkers", "description": "We walk", "category": "Health"},
    )
    assert community.status_code == 201

    events = await api_client.get(f"/api/users/{user['id']}/events")
    communities = await api_client.get(f"/api/users/{user['id']}/communities")
    assert [e["title"] for e in events.json()] == ["Walk"]
    assert [c["name"] for c in communities.json()] == ["Walkers"]


async def test_update_with_null_lists_clears_them(api_client, register_user, store):
    requester, requester_headers = await register_user()
    await api_client.put(
        f"/api/users/{requester['id']}",
        headers=requester_headers,
        json={"location": {"lat": 1.3521, "lng": 103.8198}},
    )
    user, headers = await register_user()
    await api_client.put(f"/api/users/{user['id']}", headers=headers, json={"interests": ["chess"]})

    resp = await api_client.put(
        f"/api/users/{user['id']}",
        headers=headers,
        json={"interests": None, "hobbies": None, "location": {"lat": 1.3530, "lng": 103.8200}},
    )
    assert resp.status_code == 200
    assert resp.json()["interests"] == []
    assert resp.json()["hobbies"] == []

    matches = await api_client.get("/api/peers/matches", headers=requester_headers)
    assert matches.status_code == 200
    assert [m["id"] for m in matches.json()] == [user["id"]]

    reloaded = RecordStore(store.data_dir)
    reloaded.load()
    assert len(reloaded.users) == 2
    assert reloaded.users.get(user["id"]).interests == []
