import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.crud import crud_tool
from app.schemas import tool as schemas_tool

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/popular-tools", response_model=List[schemas_tool.Tool])
def popular_tools(limit: int = Query(10, ge=0), db: Session = Depends(get_db)):
    try:
        return crud_tool.get_popular_tools(db, limit=limit)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching popular tools: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch popular tools")
