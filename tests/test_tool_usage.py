import threading

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.auth import decode_session_cookie
from app.core.config import settings
from app.core.database import Base
from app.crud import crud_tool, crud_tool_usage
from app.models.tool import Tool
from app.models.tool_usage import ToolUsage
from app.schemas.tool import ToolCreate


def test_anonymous_usage_keeps_session_id(client, make_tool):
    for i in range(5):
        make_tool(f"tool-{i}")

    response = client.post("/api/tools/5/use")

    assert response.status_code == 200
    body = response.json()
    assert body["tool_id"] == 5
    assert body["user_id"] is None
    cookie = response.cookies.get(settings.SESSION_COOKIE_NAME)
    assert cookie is not None
    assert body["session_id"] == decode_session_cookie(cookie)


def test_usage_increments_count_by_one(client, make_tool, db_session):
    tool = make_tool("pdf-merger")

    client.post(f"/api/tools/{tool.id}/use")
    client.post(f"/api/tools/{tool.id}/use", json={"metadata": {"source": "search"}})

    db_session.refresh(tool)
    assert tool.usage_count == 2
    stats = client.get(f"/api/tools/{tool.id}/stats").json()
    assert stats == {"count": 2, "unique_users": 0}


def test_authenticated_usage_records_user(client, make_tool, login):
    tool = make_tool("pdf-merger")
    session_id = login("user-42")

    body = client.post(f"/api/tools/{tool.id}/use", json={"metadata": {"source": "home"}}).json()

    assert body["user_id"] == "user-42"
    assert body["session_id"] == session_id
    assert body["metadata"] == {"source": "home"}

    usage = client.get("/api/user/usage").json()
    assert [u["id"] for u in usage] == [body["id"]]


def test_usage_for_unknown_tool_is_404_and_writes_nothing(client, db_session):
    response = client.post("/api/tools/999/use")

    assert response.status_code == 404
    assert db_session.query(ToolUsage).count() == 0


def test_usage_rejects_non_numeric_id(client):
    response = client.post("/api/tools/abc/use")

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"


def test_user_usage_requires_login(client):
    response = client.get("/api/user/usage")

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


def test_stats_for_unknown_tool_is_404(client):
    assert client.get("/api/tools/123/stats").status_code == 404


def test_concurrent_usage_is_not_undercounted(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'usage.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db = SessionLocal()
    tool_id = crud_tool.create_tool(db, ToolCreate(name="Counter", slug="counter")).id
    db.close()

    threads_count, calls_per_thread = 4, 10
    errors = []

    def worker(n):
        for i in range(calls_per_thread):
            session = SessionLocal()
            try:
                crud_tool_usage.record_tool_usage(session, tool_id=tool_id, session_id=f"worker-{n}-{i}")
            except Exception as e:  # surfaced through the assertion below
                errors.append(e)
            finally:
                session.close()

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    db = SessionLocal()
    try:
        assert errors == []
        assert db.query(Tool).filter(Tool.id == tool_id).one().usage_count == threads_count * calls_per_thread
        assert db.query(ToolUsage).count() == threads_count * calls_per_thread
    finally:
        db.close()
        engine.dispose()
