def test_list_tools_orders_by_usage(client, make_tool, db_session):
    quiet = make_tool("quiet-tool")
    busy = make_tool("busy-tool")
    busy.usage_count = 7
    db_session.commit()

    response = client.get("/api/tools")

    assert response.status_code == 200
    assert [t["slug"] for t in response.json()] == [busy.slug, quiet.slug]


def test_list_tools_filters_by_category_and_hides_inactive(client, make_category, make_tool):
    pdf = make_category("pdf-tools")
    image = make_category("image-tools")
    make_tool("pdf-merger", category_id=pdf.id)
    make_tool("pdf-retired", category_id=pdf.id, is_active=False)
    make_tool("image-resizer", category_id=image.id)

    response = client.get("/api/tools", params={"category": pdf.id})

    assert [t["slug"] for t in response.json()] == ["pdf-merger"]


def test_list_tools_by_type(client, make_tool):
    make_tool("free-one")
    make_tool("premium-one", is_premium=True)

    free = client.get("/api/tools", params={"type": "free"}).json()
    premium = client.get("/api/tools", params={"type": "premium"}).json()
    recent = client.get("/api/tools", params={"type": "recent", "limit": 1}).json()

    assert [t["slug"] for t in free] == ["free-one"]
    assert [t["slug"] for t in premium] == ["premium-one"]
    assert [t["slug"] for t in recent] == ["premium-one"]


def test_list_tools_rejects_bad_params(client):
    response = client.get("/api/tools", params={"limit": "abc"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"
    assert client.get("/api/tools", params={"type": "bogus"}).status_code == 400


def test_tool_wire_format_is_snake_case(client, make_tool):
    make_tool(
        "text-summarizer",
        short_description="Summarize long text",
        tags=["ai"],
        metadata={"model": "small"},
    )

    body = client.get("/api/tools/text-summarizer").json()

    assert body["short_description"] == "Summarize long text"
    assert body["usage_count"] == 0
    assert body["review_count"] == 0
    assert body["is_premium"] is False
    assert body["tags"] == ["ai"]
    assert body["metadata"] == {"model": "small"}


def test_unknown_tool_slug_is_404(client):
    response = client.get("/api/tools/nope")

    assert response.status_code == 404
    assert response.json() == {"detail": "Tool not found"}


def test_search_matches_name_description_and_short_description(client, make_tool):
    make_tool("pdf-merger", name="PDF Merger")
    make_tool("resizer", name="Resizer", description="Scales images to any size")
    make_tool("writer", name="Writer", short_description="Blog drafts in seconds")

    assert [t["slug"] for t in client.get("/api/tools/search", params={"q": "Merg"}).json()] == ["pdf-merger"]
    assert [t["slug"] for t in client.get("/api/tools/search", params={"q": "images"}).json()] == ["resizer"]
    assert [t["slug"] for t in client.get("/api/tools/search", params={"q": "drafts"}).json()] == ["writer"]


def test_search_without_match_returns_empty_list(client, make_tool):
    make_tool("pdf-merger", name="PDF Merger")

    response = client.get("/api/tools/search", params={"q": "spreadsheet"})

    assert response.status_code == 200
    assert response.json() == []


def test_search_requires_query(client):
    for params in ({}, {"q": ""}):
        response = client.get("/api/tools/search", params=params)
        assert response.status_code == 400
        assert response.json() == {"detail": "Query parameter 'q' is required"}


def test_popular_tools_analytics(client, make_tool, db_session):
    for i, uses in enumerate([3, 9, 1]):
        tool = make_tool(f"tool-{i}")
        tool.usage_count = uses
        db_session.commit()

    response = client.get("/api/analytics/popular-tools", params={"limit": 2})

    assert [t["slug"] for t in response.json()] == ["tool-1", "tool-0"]


def test_list_tools_popular_honours_limit(client, make_tool, db_session):
    for i, uses in enumerate([2, 8, 5]):
        tool = make_tool(f"tool-{i}")
        tool.usage_count = uses
        db_session.commit()

    response = client.get("/api/tools", params={"type": "popular", "limit": 2})

    assert response.status_code == 200
    assert [t["slug"] for t in response.json()] == ["tool-1", "tool-2"]


def test_list_tools_offset_pages_through_results(client, make_tool, db_session):
    for i, uses in enumerate([3, 2, 1]):
        tool = make_tool(f"tool-{i}")
        tool.usage_count = uses
        db_session.commit()

    first_page = client.get("/api/tools", params={"limit": 2, "offset": 0}).json()
    second_page = client.get("/api/tools", params={"limit": 2, "offset": 2}).json()

    assert [t["slug"] for t in first_page] == ["tool-0", "tool-1"]
    assert [t["slug"] for t in second_page] == ["tool-2"]
