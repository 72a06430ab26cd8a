from app.crud.crud_review import round_half_up


def _review(client, login, user_id, tool_id, rating, comment=None):
    login(user_id)
    return client.post(f"/api/tools/{tool_id}/reviews", json={"rating": rating, "comment": comment})


def test_round_half_up():
    assert round_half_up(4.5) == 5
    assert round_half_up(2.5) == 3
    assert round_half_up(3.49) == 3
    assert round_half_up(1) == 1


def test_rating_is_rounded_mean_of_reviews(client, make_tool, login, db_session):
    tool = make_tool("pdf-merger")

    assert _review(client, login, "user-1", tool.id, 5).status_code == 200
    assert _review(client, login, "user-2", tool.id, 4, "solid").status_code == 200

    db_session.refresh(tool)
    assert tool.review_count == 2
    # mean 4.5 rounds up, not to even
    assert tool.rating == 5

    _review(client, login, "user-3", tool.id, 1)
    db_session.refresh(tool)
    assert tool.review_count == 3
    assert tool.rating == round_half_up((5 + 4 + 1) / 3)


def test_second_review_by_same_user_is_rejected(client, make_tool, login, db_session):
    tool = make_tool("pdf-merger")
    _review(client, login, "user-1", tool.id, 3)

    response = client.post(f"/api/tools/{tool.id}/reviews", json={"rating": 5})

    assert response.status_code == 400
    assert response.json() == {"detail": "You have already reviewed this tool"}
    db_session.refresh(tool)
    assert tool.review_count == 1
    assert tool.rating == 3


def test_review_requires_login(client, make_tool):
    tool = make_tool("pdf-merger")

    response = client.post(f"/api/tools/{tool.id}/reviews", json={"rating": 5})

    assert response.status_code == 401


def test_review_rating_out_of_range_is_400(client, make_tool, login):
    tool = make_tool("pdf-merger")
    login("user-1")

    response = client.post(f"/api/tools/{tool.id}/reviews", json={"rating": 6})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"


def test_review_for_unknown_tool_is_404(client, login):
    login("user-1")

    assert client.post("/api/tools/77/reviews", json={"rating": 4}).status_code == 404


def test_list_reviews_is_public(client, make_tool, login):
    tool = make_tool("pdf-merger")
    _review(client, login, "user-1", tool.id, 4, "nice")
    client.cookies.clear()

    reviews = client.get(f"/api/tools/{tool.id}/reviews").json()

    assert len(reviews) == 1
    assert reviews[0]["user_id"] == "user-1"
    assert reviews[0]["comment"] == "nice"
