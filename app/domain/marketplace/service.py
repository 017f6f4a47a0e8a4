import logging
from sqlalchemy.orm import Session
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from app.models.item import Item
from app.models.user import User
from app.models.user_item import UserItem
from app.domain.badges.service import lock_user
from app.core.errors import NotFound, InsufficientFunds, AlreadyOwned

log = logging.getLogger("marketplace")

def list_items(db: Session) -> list[Item]:
    return db.execute(select(Item).order_by(Item.id)).scalars().all()

def owns_item(db: Session, user_id: int, item_id: int) -> bool:
    return db.execute(
        select(UserItem.id).where(UserItem.user_id == user_id, UserItem.item_id == item_id)
    ).scalar_one_or_none() is not None

def debit(db: Session, user_id: int, amount: int) -> bool:
    """Conditional decrement; False when the balance no longer covers ``amount``."""
    result = db.execute(
        update(User)
        .where(User.id == user_id, User.currency >= amount)
        .values(currency=User.currency - amount)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1

def buy_item(db: Session, user_id: int, item_id: int) -> int:
    """
    Debits the item price and adds the item to the inventory in one transaction.
    Returns the new currency balance.
    Checks run in order: item exists, balance covers the price, item not yet owned.
    """
    item = db.get(Item, item_id)
    if item is None:
        raise NotFound("Item not found")

    user = lock_user(db, user_id)
    if user is None:
        raise NotFound("User not found")

    if user.currency < item.price:
        db.rollback()
        raise InsufficientFunds()
    if owns_item(db, user.id, item.id):
        db.rollback()
        raise AlreadyOwned()

    # the balance read above may be stale; the UPDATE re-checks it atomically
    if not debit(db, user_id, item.price):
        db.rollback()
        raise InsufficientFunds()

    db.add(UserItem(user_id=user_id, item_id=item_id))
    try:
        db.commit()
    except IntegrityError:
        # a concurrent purchase of the same item hit uq_user_item; the debit is rolled back too
        db.rollback()
        raise AlreadyOwned()

    db.refresh(user)
    log.info("user %s bought item %s for %s", user_id, item_id, item.price)
    return user.currency
