import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.auth import encode_session_cookie, new_session_id, save_session
from app.core.config import settings
from app.core.database import Base
from app.core.dependencies import get_db
from app.crud import crud_tool, crud_tool_category, crud_user
from app.main import app
from app.schemas.tool import ToolCreate
from app.schemas.tool_category import ToolCategoryCreate
from app.schemas.user import UserUpsert


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client, db_session):
    """Sign the test client in as `user_id` by writing a session row and its cookie."""
    def _login(user_id="user-1", **claims):
        crud_user.upsert_user(db_session, UserUpsert(id=user_id, email=f"{user_id}@example.com"))
        session_id = new_session_id()
        save_session(db_session, session_id, {"claims": {"sub": user_id, **claims}})
        client.cookies.set(settings.SESSION_COOKIE_NAME, encode_session_cookie(session_id))
        return session_id
    return _login


@pytest.fixture
def make_category(db_session):
    def _make(slug="pdf-tools", name=None, **fields):
        return crud_tool_category.create_tool_category(
            db_session,
            ToolCategoryCreate(
                name=name or slug.replace("-", " ").title(),
                slug=slug,
                icon=fields.pop("icon", "fas fa-box"),
                color=fields.pop("color", "#3b82f6"),
                **fields,
            ),
        )
    return _make


@pytest.fixture
def make_tool(db_session):
    def _make(slug, category_id=None, **fields):
        name = fields.pop("name", slug.replace("-", " ").title())
        return crud_tool.create_tool(
            db_session,
            ToolCreate(name=name, slug=slug, category_id=category_id, **fields),
        )
    return _make
