import logging
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.models.user import User
from app.core.errors import NotFound, BadRequest

log = logging.getLogger("badges")

def lock_user(db: Session, user_id: int) -> User | None:
    """Re-reads the user row under SELECT ... FOR UPDATE (ignored by SQLite)."""
    return db.execute(
        select(User)
        .where(User.id == user_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()

def award_badge(db: Session, user_id: int, badge: str | None) -> bool:
    """
    Appends ``badge`` to the user's badge list unless already held.
    Returns True when the badge was new. Idempotent.
    """
    # stored exactly as submitted
    if not badge:
        raise BadRequest("Badge required")

    user = lock_user(db, user_id)
    if user is None:
        raise NotFound("User not found")

    current = list(user.badges or [])
    if badge in current:
        db.rollback()  # release the row lock
        return False

    # reassign so the JSON column is flagged dirty
    user.badges = current + [badge]
    db.commit()
    log.info("badge %r awarded to user %s", badge, user_id)
    return True
