from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
import datetime

from app.core.database import Base

class ToolCategory(Base):
    __tablename__ = "tool_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    icon = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String, nullable=False)
    tool_count = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    tools = relationship("Tool", back_populates="category")
