from pydantic import BaseModel, ConfigDict
from typing import Literal, Optional
import datetime

PlanName = Literal["free", "pro", "enterprise"]

class UserUpsert(BaseModel):
    """Identity fields taken from the provider's claims on every login."""
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None

class User(BaseModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    plan: PlanName = "free"
    plan_expires_at: Optional[datetime.datetime] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None

    model_config = ConfigDict(from_attributes=True)
