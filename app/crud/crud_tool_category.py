from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.tool_category import ToolCategory
from app.schemas import tool_category as tool_category_schema


def get_tool_categories(db: Session) -> List[ToolCategory]:
    return db.query(ToolCategory).order_by(ToolCategory.name.asc()).all()


def create_tool_category(db: Session, category: tool_category_schema.ToolCategoryCreate) -> ToolCategory:
    db_category = ToolCategory(**category.model_dump())
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category


def get_tool_category(db: Session, category_id: int) -> Optional[ToolCategory]:
    return db.query(ToolCategory).filter(ToolCategory.id == category_id).first()


def get_tool_category_by_slug(db: Session, slug: str) -> Optional[ToolCategory]:
    return db.query(ToolCategory).filter(ToolCategory.slug == slug).first()
