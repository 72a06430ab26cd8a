import math
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateReviewError, NotFoundError
from app.models.tool import Tool
from app.models.tool_review import ToolReview
from app.schemas import tool_review as tool_review_schema


def round_half_up(value) -> int:
    """Round .5 away from zero for positive averages (4.5 -> 5, 2.5 -> 3)."""
    return int(math.floor(float(value) + 0.5))


def _lock_tool(db: Session, tool_id: int) -> Tool:
    # Row lock serializes concurrent re-aggregation for the same tool (no-op on SQLite)
    tool = db.query(Tool).filter(Tool.id == tool_id).with_for_update().first()
    if tool is None:
        raise NotFoundError("Tool", tool_id)
    return tool


def _refresh_tool_rating(db: Session, tool_id: int):
    avg_rating, review_count = (
        db.query(func.avg(ToolReview.rating), func.count(ToolReview.id))
        .filter(ToolReview.tool_id == tool_id)
        .one()
    )
    db.query(Tool).filter(Tool.id == tool_id).update(
        {
            Tool.rating: round_half_up(avg_rating) if avg_rating is not None else 0,
            Tool.review_count: review_count,
        },
        synchronize_session=False,
    )


def create_tool_review(
    db: Session,
    user_id: str,
    tool_id: int,
    rating: int,
    comment: Optional[str] = None,
) -> ToolReview:
    """
    Insert a review and recompute the tool's rating and review_count from all
    of its reviews, in a single transaction.

    Raises DuplicateReviewError if the user already reviewed the tool.
    """
    _lock_tool(db, tool_id)
    if get_user_tool_review(db, user_id, tool_id) is not None:
        db.rollback()
        raise DuplicateReviewError(user_id, tool_id)

    review = ToolReview(user_id=user_id, tool_id=tool_id, rating=rating, comment=comment)
    db.add(review)
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateReviewError(user_id, tool_id) from e

    _refresh_tool_rating(db, tool_id)
    db.commit()
    db.refresh(review)
    return review


def get_tool_reviews(db: Session, tool_id: int) -> List[ToolReview]:
    return (
        db.query(ToolReview)
        .filter(ToolReview.tool_id == tool_id)
        .order_by(ToolReview.created_at.desc(), ToolReview.id.desc())
        .all()
    )


def get_user_tool_review(db: Session, user_id: str, tool_id: int) -> Optional[ToolReview]:
    return db.query(ToolReview).filter(
        ToolReview.user_id == user_id,
        ToolReview.tool_id == tool_id
    ).first()


def update_tool_review(
    db: Session,
    review_id: int,
    review: tool_review_schema.ToolReviewUpdate,
) -> Optional[ToolReview]:
    db_review = db.query(ToolReview).filter(ToolReview.id == review_id).first()
    if db_review is None:
        return None

    _lock_tool(db, db_review.tool_id)
    for field, value in review.model_dump(exclude_unset=True).items():
        setattr(db_review, field, value)
    db.flush()
    _refresh_tool_rating(db, db_review.tool_id)
    db.commit()
    db.refresh(db_review)
    return db_review
