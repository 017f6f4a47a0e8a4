# scripts/make_admin.py  --  python scripts/make_admin.py <username> [--revoke]
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import select
from app.db import SessionLocal
from app.models.user import User

def set_admin(db, username: str, is_admin: bool = True) -> bool:
    user = db.execute(select(User).where(User.username == username)).scalar_one_or_none()
    if user is None:
        return False
    user.is_admin = is_admin
    db.commit()
    return True

def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: make_admin.py <username> [--revoke]")
        return 2
    revoke = "--revoke" in args
    username = [a for a in args if a != "--revoke"][0]
    db = SessionLocal()
    try:
        if not set_admin(db, username, not revoke):
            print(f"User {username!r} not found")
            return 1
        print(f"{username} is_admin={not revoke}")
        return 0
    finally:
        db.close()

if __name__ == "__main__":
    sys.exit(main())
