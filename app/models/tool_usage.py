from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
import datetime

from app.core.database import Base

class ToolUsage(Base):
    __tablename__ = "tool_usage"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=True, index=True)  # null for anonymous use
    tool_id = Column(Integer, ForeignKey("tools.id"), nullable=False, index=True)
    session_id = Column(String, nullable=True)
    used_at = Column(DateTime, default=datetime.datetime.utcnow)
    usage_metadata = Column("metadata", JSON, nullable=True)

    user = relationship("User", back_populates="usages")
    tool = relationship("Tool", back_populates="usages")
