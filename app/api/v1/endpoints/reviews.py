import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_user_id, get_db
from app.core.exceptions import DuplicateReviewError, NotFoundError
from app.crud import crud_review
from app.schemas import tool_review as schemas_tool_review

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{tool_id}/reviews", response_model=schemas_tool_review.ToolReview)
def create_review(
    tool_id: int,
    review: schemas_tool_review.ToolReviewCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return crud_review.create_tool_review(
            db,
            user_id=user_id,
            tool_id=tool_id,
            rating=review.rating,
            comment=review.comment,
        )
    except DuplicateReviewError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Tool not found")
    except SQLAlchemyError as e:
        logger.error(f"Error creating review: {e}")
        raise HTTPException(status_code=500, detail="Failed to create review")


@router.get("/{tool_id}/reviews", response_model=List[schemas_tool_review.ToolReview])
def list_reviews(tool_id: int, db: Session = Depends(get_db)):
    try:
        return crud_review.get_tool_reviews(db, tool_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching reviews: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch reviews")
