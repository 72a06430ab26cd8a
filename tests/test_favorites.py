from app.models.user_favorite import UserFavorite


def test_add_favorite_requires_login_and_writes_nothing(client, make_tool, db_session):
    tool = make_tool("pdf-merger")

    response = client.post("/api/favorites", json={"tool_id": tool.id})

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}
    assert db_session.query(UserFavorite).count() == 0


def test_add_then_remove_restores_favorites(client, make_tool, login):
    kept = make_tool("kept")
    toggled = make_tool("toggled")
    login("user-1")
    client.post("/api/favorites", json={"tool_id": kept.id})
    before = client.get("/api/favorites").json()

    added = client.post("/api/favorites", json={"tool_id": toggled.id})
    assert added.status_code == 200
    assert added.json()["tool_id"] == toggled.id
    assert client.get(f"/api/favorites/{toggled.id}/check").json() == {"is_favorited": True}

    removed = client.delete(f"/api/favorites/{toggled.id}")
    assert removed.status_code == 204
    assert removed.content == b""

    assert client.get("/api/favorites").json() == before
    assert client.get(f"/api/favorites/{toggled.id}/check").json() == {"is_favorited": False}


def test_adding_twice_is_idempotent(client, make_tool, login, db_session):
    tool = make_tool("pdf-merger")
    login("user-1")

    first = client.post("/api/favorites", json={"tool_id": tool.id}).json()
    second = client.post("/api/favorites", json={"tool_id": tool.id}).json()

    assert first["id"] == second["id"]
    assert db_session.query(UserFavorite).count() == 1


def test_favorites_list_returns_tools_newest_first(client, make_tool, login):
    first = make_tool("first")
    second = make_tool("second")
    login("user-1")
    client.post("/api/favorites", json={"tool_id": first.id})
    client.post("/api/favorites", json={"tool_id": second.id})

    favorites = client.get("/api/favorites").json()

    assert [t["slug"] for t in favorites] == ["second", "first"]


def test_favorite_unknown_tool_is_404(client, login):
    login("user-1")

    response = client.post("/api/favorites", json={"tool_id": 404})

    assert response.status_code == 404


def test_favorite_body_is_validated(client, login):
    login("user-1")

    response = client.post("/api/favorites", json={})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"
    assert response.json()["errors"]
