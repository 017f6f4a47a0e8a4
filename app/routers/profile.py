from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.deps import get_db, require_authenticated
from app.models.user import User
from app.schemas.user import ProfileOut, AvatarIn
from app.schemas.common import MessageOut
from app.core.errors import NotFound

router = APIRouter(prefix="/api", tags=["profile"])

def load_profile(db: Session, user_id: int) -> dict:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return {
        "username": user.username,
        "avatar": user.avatar or "",
        "badges": list(user.badges or []),
        "currency": user.currency,
        "inventory": [entry.item for entry in user.inventory],
    }

@router.get("/profile", response_model=ProfileOut)
def read_profile(db: Session = Depends(get_db), me: User = Depends(require_authenticated)):
    return load_profile(db, me.id)

@router.post("/avatar", response_model=MessageOut)
def update_avatar(payload: AvatarIn,
                  db: Session = Depends(get_db),
                  me: User = Depends(require_authenticated)):
    # no validation on content or size; an absent field leaves the avatar as is
    if payload.avatar is not None:
        me.avatar = payload.avatar
        db.add(me)
        db.commit()
    return {"message": "Avatar updated"}
