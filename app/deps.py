from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session
from app.db import get_db
from app.models.user import User
from app.core.errors import Unauthenticated, Forbidden
from app.core.sessions import SessionStore
from app.core.settings import SESSION_COOKIE_NAME, SESSION_MAX_AGE, SESSION_COOKIE_SECURE
from app.security import sign_session_id, unsign_session_id

__all__ = [
    "get_db", "get_session_store", "get_session_user_id", "establish_session",
    "end_session", "require_authenticated", "require_admin",
]

def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store

def _session_token(request: Request) -> str | None:
    return unsign_session_id(request.cookies.get(SESSION_COOKIE_NAME))

def get_session_user_id(request: Request, store: SessionStore = Depends(get_session_store)) -> int | None:
    token = _session_token(request)
    if token is None:
        return None
    data = store.get(token)
    if not data:
        return None
    return data.get("user_id")

def establish_session(request: Request, response: Response, store: SessionStore, user_id: int) -> None:
    """Binds a fresh session to ``user_id``, replacing any session the client already had."""
    old = _session_token(request)
    if old is not None:
        store.destroy(old)
    token = store.create({"user_id": user_id})
    response.set_cookie(
        SESSION_COOKIE_NAME,
        sign_session_id(token),
        max_age=SESSION_MAX_AGE,
        httponly=True,
        samesite="lax",
        secure=SESSION_COOKIE_SECURE,
    )

def end_session(request: Request, response: Response, store: SessionStore) -> None:
    token = _session_token(request)
    if token is not None:
        store.destroy(token)
    response.delete_cookie(SESSION_COOKIE_NAME)

def require_authenticated(
    user_id: int | None = Depends(get_session_user_id),
    db: Session = Depends(get_db),
) -> User:
    # A stale session (user deleted since login) is treated like no session
    if user_id is None:
        raise Unauthenticated()
    user = db.get(User, user_id)
    if user is None:
        raise Unauthenticated()
    return user

def require_admin(user: User = Depends(require_authenticated)) -> User:
    if not user.is_admin:
        raise Forbidden()
    return user
