from pydantic import BaseModel, ConfigDict

class ItemOut(BaseModel):
    id: int
    name: str
    price: int
    image: str
    type: str

    model_config = ConfigDict(from_attributes=True)

class PurchaseOut(BaseModel):
    message: str
    currency: int
