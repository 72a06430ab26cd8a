import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_user_id, get_db
from app.crud import crud_tool_usage
from app.schemas import tool_usage as schemas_tool_usage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/usage", response_model=List[schemas_tool_usage.ToolUsage])
def read_user_usage(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return crud_tool_usage.get_user_tool_usage(db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching usage for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch user usage")
