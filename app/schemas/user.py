from pydantic import BaseModel
from typing import Optional, List
from app.schemas.item import ItemOut

# Fields are optional so a missing one reaches the handler and becomes a 400
class Credentials(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class AuthOut(BaseModel):
    message: str
    userId: int
    username: str

class ProfileOut(BaseModel):
    username: str
    avatar: str
    badges: List[str]
    currency: int
    inventory: List[ItemOut]

class AvatarIn(BaseModel):
    avatar: Optional[str] = None

class AdminUserOut(BaseModel):
    # password hash deliberately absent
    id: int
    username: str
    avatar: str
    isAdmin: bool
    badges: List[str]
    currency: int
    inventory: List[int]
