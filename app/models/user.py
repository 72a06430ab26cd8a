from sqlalchemy import Column, String, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
import datetime

from app.core.database import Base

USER_PLANS = ("free", "pro", "enterprise")

class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("plan IN (" + ", ".join(f"'{p}'" for p in USER_PLANS) + ")", name="ck_users_plan"),
    )

    id = Column(String, primary_key=True, index=True)  # external identity (OIDC "sub")
    email = Column(String, unique=True, index=True, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)
    plan = Column(String, default="free", nullable=False)
    plan_expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    usages = relationship("ToolUsage", back_populates="user")
    favorites = relationship("UserFavorite", back_populates="user")
    reviews = relationship("ToolReview", back_populates="user")
    ai_tool_requests = relationship("AiToolRequest", back_populates="user")

    def __repr__(self):
        return f"<User(id='{self.id}', email='{self.email}')>"
