"""
Cookie-backed server sessions.

The cookie only carries a signed session id; everything else lives in the
`sessions` table. A session whose payload holds provider claims is an
authenticated session, anything else is anonymous.
"""
import datetime
import logging
import secrets
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from fastapi import Response
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.session import AuthSession

logger = logging.getLogger(__name__)


@dataclass
class AuthContext:
    session_id: str
    user_id: Optional[str] = None
    claims: Dict[str, Any] = field(default_factory=dict)
    is_new_session: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


def encode_session_cookie(session_id: str) -> str:
    return jwt.encode({"sid": session_id}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_cookie(token: str) -> Optional[str]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        logger.warning("Discarding session cookie with an invalid signature")
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) and sid else None


def set_session_cookie(response: Response, session_id: str):
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=encode_session_cookie(session_id),
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )


def clear_session_cookie(response: Response):
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME)


def load_session(db: Session, session_id: str) -> Optional[Dict[str, Any]]:
    """Return the stored payload, or None. Expired rows are deleted."""
    row = db.query(AuthSession).filter(AuthSession.sid == session_id).first()
    if row is None:
        return None
    if row.expire <= datetime.datetime.utcnow():
        db.delete(row)
        db.commit()
        return None
    return row.sess


def save_session(db: Session, session_id: str, data: Dict[str, Any], ttl_seconds: Optional[int] = None) -> AuthSession:
    ttl = ttl_seconds if ttl_seconds is not None else settings.SESSION_TTL_SECONDS
    row = db.query(AuthSession).filter(AuthSession.sid == session_id).first()
    if row is None:
        row = AuthSession(sid=session_id)
        db.add(row)
    row.sess = data
    row.expire = datetime.datetime.utcnow() + datetime.timedelta(seconds=ttl)
    db.commit()
    return row


def destroy_session(db: Session, session_id: str) -> bool:
    deleted = db.query(AuthSession).filter(AuthSession.sid == session_id).delete(synchronize_session=False)
    db.commit()
    return deleted > 0


def resolve_auth_context(db: Session, cookie_value: Optional[str]) -> AuthContext:
    session_id = decode_session_cookie(cookie_value) if cookie_value else None
    if session_id is None:
        return AuthContext(session_id=new_session_id(), is_new_session=True)

    data = load_session(db, session_id) or {}
    claims = data.get("claims") or {}
    return AuthContext(session_id=session_id, user_id=claims.get("sub"), claims=claims)
