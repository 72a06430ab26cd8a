from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON, CheckConstraint
from sqlalchemy.orm import relationship
import datetime

from app.core.database import Base

AI_TOOL_REQUEST_STATUSES = ("pending", "processing", "completed", "failed")

class AiToolRequest(Base):
    """A request for a tool that does not exist yet."""
    __tablename__ = "ai_tool_requests"
    __table_args__ = (
        CheckConstraint(
            "status IN (" + ", ".join(f"'{s}'" for s in AI_TOOL_REQUEST_STATUSES) + ")",
            name="ck_ai_tool_requests_status",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=True, index=True)
    query = Column(Text, nullable=False)
    status = Column(String, default="pending", nullable=False)
    generated_tool_id = Column(Integer, ForeignKey("tools.id"), nullable=True)
    request_metadata = Column("metadata", JSON, nullable=True)
    requested_at = Column(DateTime, default=datetime.datetime.utcnow)
    completed_at = Column(DateTime, nullable=True)

    user = relationship("User", back_populates="ai_tool_requests")
    generated_tool = relationship("Tool")
