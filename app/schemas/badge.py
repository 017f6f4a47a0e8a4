from pydantic import BaseModel
from typing import Optional

class BadgeIn(BaseModel):
    badge: Optional[str] = None
