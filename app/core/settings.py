import os
from dotenv import load_dotenv

load_dotenv()

PORT = int(os.getenv("PORT", "3000"))
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./zentrix.db")

SESSION_SECRET = os.getenv("SESSION_SECRET", "defaultsecret")
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "zentrix.sid")
SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", "86400"))  # 1 day
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "0") == "1"

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

_origins = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS = [o.strip() for o in _origins.split(",") if o.strip()] or ["http://localhost:5173"]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
