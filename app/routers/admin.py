import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.deps import get_db, require_admin
from app.models.user import User
from app.models.game import Game
from app.schemas.user import AdminUserOut
from app.schemas.game import AdminGameOut
from app.schemas.badge import BadgeIn
from app.schemas.common import MessageOut
from app.domain.badges.service import award_badge

log = logging.getLogger("admin")

# every route here requires an administrator session
router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])

def _user_out(u: User) -> dict:
    return {
        "id": u.id,
        "username": u.username,
        "avatar": u.avatar or "",
        "isAdmin": bool(u.is_admin),
        "badges": list(u.badges or []),
        "currency": u.currency,
        "inventory": [entry.item_id for entry in u.inventory],
    }

def _game_out(g: Game) -> dict:
    return {
        "id": g.id,
        "title": g.title,
        "description": g.description,
        "creator": g.creator_id,
        "thumbnail": g.thumbnail,
        "filePath": g.file_path,
        "createdAt": g.created_at,
    }

@router.get("/users", response_model=list[AdminUserOut])
def list_users(db: Session = Depends(get_db)):
    users = db.execute(select(User).order_by(User.id)).scalars().all()
    return [_user_out(u) for u in users]

@router.delete("/users/{user_id}", response_model=MessageOut)
def delete_user(user_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    # a missing id is not an error; games of the user are kept
    user = db.get(User, user_id)
    if user is not None:
        db.delete(user)
        db.commit()
        log.info("admin %s deleted user %s", admin.id, user_id)
    return {"message": "User deleted"}

@router.get("/games", response_model=list[AdminGameOut])
def list_all_games(db: Session = Depends(get_db)):
    games = db.execute(select(Game).order_by(Game.id)).scalars().all()
    return [_game_out(g) for g in games]

@router.delete("/games/{game_id}", response_model=MessageOut)
def delete_game(game_id: int, db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    game = db.get(Game, game_id)
    if game is not None:
        db.delete(game)
        db.commit()
        log.info("admin %s deleted game %s", admin.id, game_id)
    return {"message": "Game deleted"}

@router.post("/users/{user_id}/badges", response_model=MessageOut)
def give_badge(user_id: int, payload: BadgeIn, db: Session = Depends(get_db)):
    award_badge(db, user_id, payload.badge)
    return {"message": "Badge awarded"}
