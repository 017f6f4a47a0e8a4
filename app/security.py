from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.settings import SESSION_SECRET, SESSION_MAX_AGE, BCRYPT_ROUNDS

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def sign_session_id(session_id: str, max_age: int = SESSION_MAX_AGE) -> str:
    """Wraps an opaque session id in a signed, expiring cookie value."""
    expire = datetime.now(tz=timezone.utc) + timedelta(seconds=max_age)
    to_encode = {"sid": session_id, "exp": expire}
    return jwt.encode(to_encode, SESSION_SECRET, algorithm=ALGORITHM)

def unsign_session_id(cookie_value: str | None) -> str | None:
    """Returns the session id of a cookie value, or None if it is forged or expired."""
    if not cookie_value:
        return None
    try:
        payload = jwt.decode(cookie_value, SESSION_SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None
    sid = payload.get("sid")
    return sid if isinstance(sid, str) else None
