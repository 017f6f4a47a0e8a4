from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class CreatorOut(BaseModel):
    id: int
    username: str

class GameOut(BaseModel):
    id: int
    title: str
    description: str
    creator: Optional[CreatorOut] = None  # None once the creator was deleted
    thumbnail: str
    filePath: str
    createdAt: datetime

class AdminGameOut(BaseModel):
    id: int
    title: str
    description: str
    creator: int
    thumbnail: str
    filePath: str
    createdAt: datetime

class GameCreatedOut(BaseModel):
    message: str
    gameId: int
