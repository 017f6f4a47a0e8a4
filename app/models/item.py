from sqlalchemy import Column, Integer, String, CheckConstraint
from app.db import Base

class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    price = Column(Integer, nullable=False)
    image = Column(String(255), nullable=False)
    type = Column(String(40), nullable=False)  # avatar | frame | background ...

    __table_args__ = (CheckConstraint("price >= 0", name="price_non_negative"),)
