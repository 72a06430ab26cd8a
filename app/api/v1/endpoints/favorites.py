import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.dependencies import get_current_user_id, get_db
from app.core.exceptions import NotFoundError
from app.crud import crud_favorite
from app.schemas import tool as schemas_tool
from app.schemas import user_favorite as schemas_user_favorite

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=schemas_user_favorite.UserFavorite)
def add_favorite(
    favorite: schemas_user_favorite.UserFavoriteCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return crud_favorite.add_user_favorite(db, user_id=user_id, tool_id=favorite.tool_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Tool not found")
    except SQLAlchemyError as e:
        logger.error(f"Error adding favorite: {e}")
        raise HTTPException(status_code=500, detail="Failed to add favorite")


@router.delete("/{tool_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_favorite(
    tool_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        crud_favorite.remove_user_favorite(db, user_id=user_id, tool_id=tool_id)
    except SQLAlchemyError as e:
        logger.error(f"Error removing favorite: {e}")
        raise HTTPException(status_code=500, detail="Failed to remove favorite")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=List[schemas_tool.Tool])
def list_favorites(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return crud_favorite.get_user_favorites(db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching favorites: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch favorites")


@router.get("/{tool_id}/check", response_model=schemas_user_favorite.FavoriteCheck)
def check_favorite(
    tool_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return {"is_favorited": crud_favorite.is_tool_favorited(db, user_id, tool_id)}
    except SQLAlchemyError as e:
        logger.error(f"Error checking favorite: {e}")
        raise HTTPException(status_code=500, detail="Failed to check favorite")
