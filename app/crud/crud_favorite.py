from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.crud import crud_tool
from app.models.tool import Tool
from app.models.user_favorite import UserFavorite


def get_user_favorite(db: Session, user_id: str, tool_id: int) -> Optional[UserFavorite]:
    return db.query(UserFavorite).filter(
        UserFavorite.user_id == user_id,
        UserFavorite.tool_id == tool_id
    ).first()


def add_user_favorite(db: Session, user_id: str, tool_id: int) -> UserFavorite:
    """Favorite a tool. Adding an existing favorite returns the existing row."""
    if crud_tool.get_tool(db, tool_id) is None:
        raise NotFoundError("Tool", tool_id)

    existing = get_user_favorite(db, user_id, tool_id)
    if existing:
        return existing

    favorite = UserFavorite(user_id=user_id, tool_id=tool_id)
    db.add(favorite)
    try:
        db.commit()
    except IntegrityError:
        # another request inserted the same pair first
        db.rollback()
        return get_user_favorite(db, user_id, tool_id)
    db.refresh(favorite)
    return favorite


def remove_user_favorite(db: Session, user_id: str, tool_id: int) -> bool:
    deleted = db.query(UserFavorite).filter(
        UserFavorite.user_id == user_id,
        UserFavorite.tool_id == tool_id
    ).delete(synchronize_session=False)
    db.commit()
    return deleted > 0


def get_user_favorites(db: Session, user_id: str) -> List[Tool]:
    return (
        db.query(Tool)
        .join(UserFavorite, UserFavorite.tool_id == Tool.id)
        .filter(UserFavorite.user_id == user_id)
        .order_by(UserFavorite.created_at.desc(), UserFavorite.id.desc())
        .all()
    )


def is_tool_favorited(db: Session, user_id: str, tool_id: int) -> bool:
    return get_user_favorite(db, user_id, tool_id) is not None
