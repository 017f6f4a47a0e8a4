from sqlalchemy import Column, Integer, ForeignKey, DateTime, UniqueConstraint, func
from sqlalchemy.orm import relationship
from app.db import Base
from app.models.item import Item

class UserItem(Base):
    """One owned item in a user's inventory."""
    __tablename__ = "user_items"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    item_id = Column(Integer, ForeignKey("items.id", ondelete="CASCADE"), index=True, nullable=False)
    acquired_at = Column(DateTime(timezone=True), server_default=func.now())

    item = relationship(Item, lazy="joined")

    __table_args__ = (UniqueConstraint('user_id', 'item_id', name='uq_user_item'),)
