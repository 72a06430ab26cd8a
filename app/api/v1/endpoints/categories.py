import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.crud import crud_tool_category
from app.schemas import tool_category as schemas_tool_category

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas_tool_category.ToolCategory])
def list_categories(db: Session = Depends(get_db)):
    try:
        return crud_tool_category.get_tool_categories(db)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")


@router.get("/{slug}", response_model=schemas_tool_category.ToolCategory)
def get_category(slug: str, db: Session = Depends(get_db)):
    try:
        category = crud_tool_category.get_tool_category_by_slug(db, slug)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching category {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch category")
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return category
