import datetime
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.models.tool import Tool
from app.models.tool_category import ToolCategory
from app.schemas import tool as tool_schema

FREE_TOOLS_LIMIT = 10


def _active_tools(db: Session):
    return db.query(Tool).filter(Tool.is_active.is_(True))


def _adjust_category_tool_count(db: Session, category_id: Optional[int], delta: int):
    if category_id is None:
        return
    db.query(ToolCategory).filter(ToolCategory.id == category_id).update(
        {ToolCategory.tool_count: func.coalesce(ToolCategory.tool_count, 0) + delta},
        synchronize_session=False,
    )


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def get_tools(db: Session, category_id: Optional[int] = None, limit: int = 50, offset: int = 0) -> List[Tool]:
    query = _active_tools(db)
    if category_id:
        query = query.filter(Tool.category_id == category_id)
    return query.order_by(Tool.usage_count.desc()).offset(offset).limit(limit).all()


def get_tools_by_category(db: Session, category_id: int) -> List[Tool]:
    return _active_tools(db).filter(Tool.category_id == category_id).order_by(Tool.usage_count.desc()).all()


def get_free_tools(db: Session) -> List[Tool]:
    return (
        _active_tools(db)
        .filter(Tool.is_premium.is_(False))
        .order_by(Tool.usage_count.desc())
        .limit(FREE_TOOLS_LIMIT)
        .all()
    )


def get_premium_tools(db: Session) -> List[Tool]:
    return _active_tools(db).filter(Tool.is_premium.is_(True)).order_by(Tool.usage_count.desc()).all()


def get_popular_tools(db: Session, limit: int = 10) -> List[Tool]:
    return _active_tools(db).order_by(Tool.usage_count.desc()).limit(limit).all()


def get_recent_tools(db: Session, limit: int = 10) -> List[Tool]:
    return _active_tools(db).order_by(Tool.created_at.desc(), Tool.id.desc()).limit(limit).all()


def search_tools(db: Session, query: str) -> List[Tool]:
    """Substring match over name, description and short description."""
    pattern = f"%{_escape_like(query)}%"
    return (
        _active_tools(db)
        .filter(
            or_(
                Tool.name.like(pattern, escape="\\"),
                Tool.description.like(pattern, escape="\\"),
                Tool.short_description.like(pattern, escape="\\"),
            )
        )
        .order_by(Tool.usage_count.desc())
        .all()
    )


def get_tool(db: Session, tool_id: int) -> Optional[Tool]:
    return db.query(Tool).filter(Tool.id == tool_id).first()


def get_tool_by_slug(db: Session, slug: str) -> Optional[Tool]:
    return db.query(Tool).filter(Tool.slug == slug).first()


def create_tool(db: Session, tool: tool_schema.ToolCreate) -> Tool:
    db_tool = Tool(**tool.model_dump(exclude={"metadata"}), tool_metadata=tool.metadata)
    db.add(db_tool)
    _adjust_category_tool_count(db, tool.category_id, 1)
    db.commit()
    db.refresh(db_tool)
    return db_tool


def update_tool(db: Session, tool_id: int, tool: tool_schema.ToolUpdate) -> Optional[Tool]:
    db_tool = get_tool(db, tool_id)
    if db_tool is None:
        return None

    changes = tool.model_dump(exclude_unset=True)
    if "metadata" in changes:
        db_tool.tool_metadata = changes.pop("metadata")
    if "category_id" in changes and changes["category_id"] != db_tool.category_id:
        _adjust_category_tool_count(db, db_tool.category_id, -1)
        _adjust_category_tool_count(db, changes["category_id"], 1)
    for field, value in changes.items():
        setattr(db_tool, field, value)
    db_tool.updated_at = datetime.datetime.utcnow()

    db.commit()
    db.refresh(db_tool)
    return db_tool


def increment_tool_usage(db: Session, tool_id: int) -> int:
    """Bump usage_count in SQL; returns the number of rows touched. Does not commit."""
    return db.query(Tool).filter(Tool.id == tool_id).update(
        {Tool.usage_count: func.coalesce(Tool.usage_count, 0) + 1},
        synchronize_session=False,
    )
