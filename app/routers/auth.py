import logging
from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from app.schemas.user import Credentials, AuthOut
from app.schemas.common import MessageOut
from app.models.user import User
from app.security import get_password_hash, verify_password
from app.deps import get_db, get_session_store, establish_session, end_session
from app.core.sessions import SessionStore
from app.core.errors import BadRequest, UsernameTaken, InvalidCredentials

log = logging.getLogger("auth")

router = APIRouter(prefix="/api", tags=["auth"])

def find_user(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()

@router.post("/signup", response_model=AuthOut)
def signup(payload: Credentials, request: Request, response: Response,
           db: Session = Depends(get_db),
           store: SessionStore = Depends(get_session_store)):
    if not payload.username or not payload.password:
        raise BadRequest("Username and password required")

    if find_user(db, payload.username):
        raise UsernameTaken()

    user = User(username=payload.username, password=get_password_hash(payload.password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent signup with the same name
        db.rollback()
        raise UsernameTaken()
    db.refresh(user)

    establish_session(request, response, store, user.id)
    log.info("signup %r -> user %s", user.username, user.id)
    return {"message": "Signup successful", "userId": user.id, "username": user.username}

@router.post("/login", response_model=AuthOut)
def login(payload: Credentials, request: Request, response: Response,
          db: Session = Depends(get_db),
          store: SessionStore = Depends(get_session_store)):
    user = None
    if payload.username:
        user = find_user(db, payload.username)
    if not user or not payload.password or not verify_password(payload.password, user.password):
        log.info("failed login for %r", payload.username)
        raise InvalidCredentials()

    establish_session(request, response, store, user.id)
    return {"message": "Login successful", "userId": user.id, "username": user.username}

@router.post("/logout", response_model=MessageOut)
def logout(request: Request, response: Response,
           store: SessionStore = Depends(get_session_store)):
    end_session(request, response, store)
    return {"message": "Logged out"}
