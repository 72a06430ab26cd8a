from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
import datetime

class ToolReviewCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None

class ToolReviewUpdate(BaseModel):
    rating: Optional[int] = Field(None, ge=1, le=5)
    comment: Optional[str] = None

class ToolReview(BaseModel):
    id: int
    user_id: str
    tool_id: int
    rating: int
    comment: Optional[str] = None
    created_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True)
