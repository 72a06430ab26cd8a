import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import distinct, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.crud import crud_tool
from app.models.tool_usage import ToolUsage

logger = logging.getLogger(__name__)


def record_tool_usage(
    db: Session,
    tool_id: int,
    user_id: Optional[str] = None,
    session_id: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> ToolUsage:
    """
    Insert a usage row and bump the tool's usage_count.

    Both writes share one transaction and the counter is incremented in SQL,
    so concurrent calls never lose an increment.
    """
    usage = ToolUsage(user_id=user_id, tool_id=tool_id, session_id=session_id, usage_metadata=metadata)
    try:
        if crud_tool.increment_tool_usage(db, tool_id) == 0:
            db.rollback()
            raise NotFoundError("Tool", tool_id)
        db.add(usage)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error recording usage for tool {tool_id}: {e}")
        raise
    db.refresh(usage)
    return usage


def get_user_tool_usage(db: Session, user_id: str) -> List[ToolUsage]:
    return (
        db.query(ToolUsage)
        .filter(ToolUsage.user_id == user_id)
        .order_by(ToolUsage.used_at.desc(), ToolUsage.id.desc())
        .all()
    )


def get_tool_usage_stats(db: Session, tool_id: int) -> Dict[str, int]:
    count, unique_users = (
        db.query(func.count(ToolUsage.id), func.count(distinct(ToolUsage.user_id)))
        .filter(ToolUsage.tool_id == tool_id)
        .one()
    )
    return {"count": count or 0, "unique_users": unique_users or 0}
