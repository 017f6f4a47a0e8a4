from sqlalchemy import Column, Integer, String, Text, Boolean, JSON, CheckConstraint
from sqlalchemy.orm import relationship
from app.db import Base
from app.models.user_item import UserItem

STARTING_CURRENCY = 1000

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash, never the plain text

    avatar = Column(Text, nullable=False, default="")  # URLs or data: URLs, any size
    is_admin = Column(Boolean, nullable=False, default=False)

    badges = Column(JSON, nullable=False, default=list)  # ordered, no duplicates
    currency = Column(Integer, nullable=False, default=STARTING_CURRENCY)

    inventory = relationship(
        UserItem,
        order_by=UserItem.id,
        cascade="all, delete-orphan",
    )

    __table_args__ = (CheckConstraint("currency >= 0", name="currency_non_negative"),)
