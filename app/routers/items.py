from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.deps import get_db, require_authenticated
from app.models.user import User
from app.schemas.item import ItemOut, PurchaseOut
from app.domain.marketplace.service import list_items, buy_item

router = APIRouter(prefix="/api/items", tags=["items"])

@router.get("", response_model=list[ItemOut])
def read_items(db: Session = Depends(get_db)):
    return list_items(db)

@router.post("/buy/{item_id}", response_model=PurchaseOut)
def purchase_item(item_id: int,
                  db: Session = Depends(get_db),
                  me: User = Depends(require_authenticated)):
    currency = buy_item(db, me.id, item_id)
    return {"message": "Item purchased", "currency": currency}
