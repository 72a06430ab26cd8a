import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_user_id, get_db
from app.crud import crud_ai_tool_request
from app.schemas import ai_tool_request as schemas_ai_tool_request

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/request", response_model=schemas_ai_tool_request.AiToolRequest)
def create_ai_tool_request(
    request: schemas_ai_tool_request.AiToolRequestCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Queue a description of a tool the catalog is missing. Nothing processes it yet."""
    try:
        return crud_ai_tool_request.create_ai_tool_request(
            db, user_id=user_id, query=request.query, metadata=request.metadata
        )
    except SQLAlchemyError as e:
        logger.error(f"Error creating AI tool request: {e}")
        raise HTTPException(status_code=500, detail="Failed to create AI tool request")


@router.get("/requests", response_model=List[schemas_ai_tool_request.AiToolRequest])
def list_ai_tool_requests(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return crud_ai_tool_request.get_user_ai_tool_requests(db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching AI tool requests: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch AI tool requests")
