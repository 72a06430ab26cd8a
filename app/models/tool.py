from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
import datetime

from app.core.database import Base

class Tool(Base):
    __tablename__ = "tools"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    short_description = Column(String, nullable=True)
    category_id = Column(Integer, ForeignKey("tool_categories.id"), nullable=True)
    icon = Column(String, nullable=True)
    is_premium = Column(Boolean, default=False)
    is_ai_generated = Column(Boolean, default=False)
    usage_count = Column(Integer, default=0)
    rating = Column(Integer, default=0)  # rounded average, 0-5
    review_count = Column(Integer, default=0)
    tags = Column(JSON, nullable=True)
    # "metadata" is reserved on declarative classes
    tool_metadata = Column("metadata", JSON, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    category = relationship("ToolCategory", back_populates="tools")
    usages = relationship("ToolUsage", back_populates="tool")
    reviews = relationship("ToolReview", back_populates="tool")
