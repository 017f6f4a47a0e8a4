# scripts/seed_items.py
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import select
from app.db import Base, SessionLocal, engine
from app.models.item import Item

SEEDS = [
    # name,                 price, image,                               type
    ("Neon Visor",           300,  "/uploads/items/neon_visor.png",     "avatar"),
    ("Pixel Crown",          750,  "/uploads/items/pixel_crown.png",    "avatar"),
    ("Retro Frame",          150,  "/uploads/items/retro_frame.png",    "frame"),
    ("Gold Frame",           900,  "/uploads/items/gold_frame.png",     "frame"),
    ("Starfield",            200,  "/uploads/items/starfield.png",      "background"),
    ("Synthwave Sunset",     450,  "/uploads/items/synthwave.png",      "background"),
    ("Dragon Pet",          1200,  "/uploads/items/dragon_pet.png",     "pet"),
]

def upsert_item(db, name, price, image, type_):
    row = db.execute(select(Item).where(Item.name == name)).scalar_one_or_none()
    if row:
        row.price = price
        row.image = image
        row.type = type_
    else:
        row = Item(name=name, price=price, image=image, type=type_)
        db.add(row)
    db.commit()
    return row

def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        for name, price, image, type_ in SEEDS:
            upsert_item(db, name, price, image, type_)
        print(f"Items seed OK ({len(SEEDS)} items)")
    finally:
        db.close()

if __name__ == "__main__":
    main()
