from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
import datetime

class ToolBase(BaseModel):
    name: str
    slug: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    category_id: Optional[int] = None
    icon: Optional[str] = None
    is_premium: bool = False
    is_ai_generated: bool = False
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = Field(
        None, validation_alias=AliasChoices("tool_metadata", "metadata")
    )
    is_active: bool = True

class ToolCreate(ToolBase):
    pass

class ToolUpdate(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    category_id: Optional[int] = None
    icon: Optional[str] = None
    is_premium: Optional[bool] = None
    is_ai_generated: Optional[bool] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None

class Tool(ToolBase):
    id: int
    usage_count: int = 0
    rating: int = 0
    review_count: int = 0
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True)

class ToolUsageStats(BaseModel):
    count: int
    unique_users: int
