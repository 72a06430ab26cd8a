from pydantic import BaseModel, ConfigDict
from typing import Optional
import datetime

class UserFavoriteCreate(BaseModel):
    tool_id: int

class UserFavorite(BaseModel):
    id: int
    user_id: str
    tool_id: int
    created_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True)

class FavoriteCheck(BaseModel):
    is_favorited: bool
