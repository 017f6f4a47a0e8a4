from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from app.db import Base

class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)

    # Weak back-reference: deleting the user keeps the game
    creator_id = Column(Integer, index=True, nullable=False)

    thumbnail = Column(String(512), nullable=False)   # uploads/thumbnails/...
    file_path = Column(String(512), nullable=False)   # uploads/games/...
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
