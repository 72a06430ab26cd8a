from pydantic import BaseModel, ConfigDict
from typing import Optional
import datetime

class ToolCategoryBase(BaseModel):
    name: str
    slug: str
    icon: str
    description: Optional[str] = None
    color: str

class ToolCategoryCreate(ToolCategoryBase):
    pass

class ToolCategory(ToolCategoryBase):
    id: int
    tool_count: int = 0
    created_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True)
