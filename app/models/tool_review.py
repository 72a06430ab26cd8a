from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
import datetime

from app.core.database import Base

class ToolReview(Base):
    __tablename__ = "tool_reviews"
    __table_args__ = (
        UniqueConstraint("user_id", "tool_id", name="uq_tool_reviews_user_tool"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_tool_reviews_rating_range"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    tool_id = Column(Integer, ForeignKey("tools.id"), nullable=False, index=True)
    rating = Column(Integer, nullable=False)  # 1-5
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    user = relationship("User", back_populates="reviews")
    tool = relationship("Tool", back_populates="reviews")
