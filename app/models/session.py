from sqlalchemy import Column, String, DateTime, JSON

from app.core.database import Base

class AuthSession(Base):
    """Server-side session store read and written by the auth layer."""
    __tablename__ = "sessions"

    sid = Column(String, primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime, nullable=False, index=True)
