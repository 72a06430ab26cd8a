from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from app.core.auth import AuthContext, resolve_auth_context, set_session_cookie
from app.core.config import settings
from app.core.database import SessionLocal


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_auth_context(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthContext:
    """
    Resolve the caller's session from the signed cookie.

    Callers without a valid cookie get a fresh anonymous session id, and the
    cookie is issued on the way out.
    """
    context = resolve_auth_context(db, request.cookies.get(settings.SESSION_COOKIE_NAME))
    if context.is_new_session:
        set_session_cookie(response, context.session_id)
    return context


def get_current_user_id(context: AuthContext = Depends(get_auth_context)) -> str:
    if not context.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return context.user_id
