from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional
import datetime

class ToolUsageCreate(BaseModel):
    metadata: Optional[Dict[str, Any]] = None

class ToolUsage(BaseModel):
    id: int
    user_id: Optional[str] = None
    tool_id: int
    session_id: Optional[str] = None
    used_at: Optional[datetime.datetime] = None
    metadata: Optional[Dict[str, Any]] = Field(
        None, validation_alias=AliasChoices("usage_metadata", "metadata")
    )

    model_config = ConfigDict(from_attributes=True)
