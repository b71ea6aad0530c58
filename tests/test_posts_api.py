import datetime as dt


async def create_post(api_client, headers, **payload):
    payload.setdefault("content", "Hello neighbours")
    resp = await api_client.post("/api/posts", headers=headers, json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_create_post_with_author(api_client, register_user):
    user, headers = await register_user(name="Ada")
    post = await create_post(api_client, headers)
    assert post["author"] == {"id": user["id"], "name": "Ada", "email": user["email"]}
    assert post["type"] == "text"
    assert post["likes"] == []


async def test_media_type_from_url(api_client, register_user):
    _, headers = await register_user()
    photo = await create_post(api_client, headers, media_url="https://cdn.example.com/a.JPG")
    video = await create_post(api_client, headers, media_url="https://cdn.example.com/b.mp4")
    other = await create_post(api_client, headers, media_url="https://cdn.example.com/c.pdf", type="link")
    assert (photo["type"], video["type"], other["type"]) == ("photo", "video", "link")


async def test_blank_content_rejected(api_client, register_user):
    _, headers = await register_user()
    resp = await api_client.post("/api/posts", headers=headers, json={"content": "   "})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Content is required"}


async def test_list_newest_first(api_client, register_user, store):
    _, headers = await register_user()
    first = await create_post(api_client, headers, content="first")
    await create_post(api_client, headers, content="second")
    stored = store.posts.get(first["id"])
    stored.created_at = stored.created_at - dt.timedelta(minutes=5)
    resp = await api_client.get("/api/posts")
    assert [p["content"] for p in resp.json()] == ["second", "first"]


async def test_toggle_like(api_client, register_user):
    _, headers = await register_user()
    post = await create_post(api_client, headers)

    liked = await api_client.post(f"/api/posts/{post['id']}/like", headers=headers)
    assert liked.json() == {"message": "Post liked", "likes": 1, "is_liked": True}

    unliked = await api_client.post(f"/api/posts/{post['id']}/like", headers=headers)
    assert unliked.json() == {"message": "Post unliked", "likes": 0, "is_liked": False}


async def test_comment(api_client, register_user):
    _, author = await register_user()
    commenter, commenter_headers = await register_user(name="Grace")
    post = await create_post(api_client, author)

    resp = await api_client.post(
        f"/api/posts/{post['id']}/comment", headers=commenter_headers, json={"content": "Welcome!"}
    )
    assert resp.status_code == 201
    assert resp.json()["author"]["name"] == "Grace"
    assert resp.json()["user_id"] == commenter["id"]

    fetched = await api_client.get(f"/api/posts/{post['id']}")
    assert [c["content"] for c in fetched.json()["comments"]] == ["Welcome!"]


async def test_delete_author_only(api_client, register_user):
    _, author = await register_user()
    _, stranger = await register_user()
    post = await create_post(api_client, author)

    denied = await api_client.delete(f"/api/posts/{post['id']}", headers=stranger)
    assert denied.status_code == 403
    assert denied.json() == {"message": "Not authorized to delete this post"}

    deleted = await api_client.delete(f"/api/posts/{post['id']}", headers=author)
    assert deleted.status_code == 204
    assert (await api_client.get(f"/api/posts/{post['id']}")).status_code == 404


async def test_like_unknown_post(api_client, register_user):
    _, headers = await register_user()
    resp = await api_client.post("/api/posts/missing/like", headers=headers)
    assert resp.status_code == 404
