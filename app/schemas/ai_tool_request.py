from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Optional
import datetime

AiToolRequestStatus = Literal["pending", "processing", "completed", "failed"]

class AiToolRequestCreate(BaseModel):
    query: str = Field(..., min_length=1)
    metadata: Optional[Dict[str, Any]] = None

class AiToolRequestUpdate(BaseModel):
    status: Optional[AiToolRequestStatus] = None
    generated_tool_id: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = None
    completed_at: Optional[datetime.datetime] = None

class AiToolRequest(BaseModel):
    id: int
    user_id: Optional[str] = None
    query: str
    status: AiToolRequestStatus = "pending"
    generated_tool_id: Optional[int] = None
    metadata: Optional[Dict[str, Any]] = Field(
        None, validation_alias=AliasChoices("request_metadata", "metadata")
    )
    requested_at: Optional[datetime.datetime] = None
    completed_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True)
