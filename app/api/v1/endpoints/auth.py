import asyncio
import datetime
import logging
import secrets
from typing import Optional
from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.auth import (
    AuthContext,
    clear_session_cookie,
    destroy_session,
    load_session,
    new_session_id,
    save_session,
    set_session_cookie,
)
from app.core.config import settings
from app.core.dependencies import get_auth_context, get_current_user_id, get_db
from app.core.exceptions import AuthenticationError
from app.crud import crud_user
from app.schemas import user as schemas_user
from app.services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _safe_return_path(redirect: Optional[str]) -> str:
    # Same-site relative paths only; browsers read "/\host" as "//host"
    if not redirect or not redirect.startswith("/") or "\\" in redirect:
        return "/"
    parts = urlsplit(redirect)
    if parts.scheme or parts.netloc or redirect.startswith("//"):
        return "/"
    return redirect


def _login_url() -> str:
    return f"{settings.API_STR}/login"


@router.get("/auth/user", response_model=schemas_user.User)
def read_current_user(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        user = crud_user.get_user(db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching user: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch user")
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def _store_login_state(db: Session, context: AuthContext, state: str, return_to: str):
    data = load_session(db, context.session_id) or {}
    data.update({"oauth_state": state, "return_to": return_to})
    # Signed-in sessions keep their lifetime; pre-login rows are short lived
    ttl = None if data.get("claims") else settings.LOGIN_STATE_TTL_SECONDS
    save_session(db, context.session_id, data, ttl_seconds=ttl)


@router.get("/login")
async def login(
    redirect: Optional[str] = None,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
):
    try:
        metadata = await auth_service.get_provider_metadata()
    except AuthenticationError as e:
        raise HTTPException(status_code=502, detail=str(e))

    state = secrets.token_urlsafe(24)
    await asyncio.to_thread(_store_login_state, db, context, state, _safe_return_path(redirect))

    response = RedirectResponse(auth_service.build_authorize_url(metadata, state), status_code=302)
    if context.is_new_session:
        set_session_cookie(response, context.session_id)
    return response


def _start_authenticated_session(db: Session, old_session_id: str, claims: dict) -> str:
    auth_service.complete_login(db, claims)
    # New sid on privilege change
    destroy_session(db, old_session_id)
    session_id = new_session_id()
    expires_at = datetime.datetime.utcnow() + datetime.timedelta(seconds=settings.SESSION_TTL_SECONDS)
    save_session(db, session_id, {"claims": claims, "expires_at": expires_at.isoformat()})
    return session_id


@router.get("/callback")
async def callback(
    code: Optional[str] = None,
    state: Optional[str] = None,
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
):
    data = await asyncio.to_thread(load_session, db, context.session_id) or {}
    expected_state = data.get("oauth_state")
    if not code or not state or not expected_state or not secrets.compare_digest(state, expected_state):
        logger.warning("[OIDC] Callback with missing or mismatched state")
        return RedirectResponse(_login_url(), status_code=302)

    try:
        claims = await auth_service.authenticate(code)
    except AuthenticationError as e:
        logger.warning(f"[OIDC] Login failed: {e}")
        return RedirectResponse(_login_url(), status_code=302)

    session_id = await asyncio.to_thread(_start_authenticated_session, db, context.session_id, claims)

    response = RedirectResponse(_safe_return_path(data.get("return_to")), status_code=302)
    set_session_cookie(response, session_id)
    return response


@router.get("/logout")
def logout(
    db: Session = Depends(get_db),
    context: AuthContext = Depends(get_auth_context),
):
    destroy_session(db, context.session_id)
    response = RedirectResponse("/", status_code=302)
    clear_session_cookie(response)
    return response
