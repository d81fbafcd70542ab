import logging

import requests
from sqlalchemy.orm import Session

from database import SessionLocal, init_db
from models.product import Product
from utils.validation import validate_product

logger = logging.getLogger(__name__)

DUMMYJSON_PRODUCTS_URL = "https://dummyjson.com/products"


def _to_payload(p: dict) -> dict:
    # DummyJSON titles can be longer than the name column allows
    return {
        "name": (p.get("title") or "")[:30].strip(),
        "description": p.get("description") or "",
        "price": float(p.get("price", 0)),
        "quantity": int(p.get("stock", 0)),
    }


def import_dummy_products(db: Session, limit: int = 50) -> int:
    logger.info("Importing products from DummyJSON...")
    res = requests.get(DUMMYJSON_PRODUCTS_URL, params={"limit": limit}, timeout=10)
    res.raise_for_status()
    products = res.json().get("products", [])
    count = 0

    for p in products:
        payload = _to_payload(p)
        violations = validate_product(payload)
        if violations:
            logger.warning("Skipping %r: %s", p.get("title"), violations)
            continue

        exists = db.query(Product).filter(Product.name == payload["name"]).first()
        if exists:
            continue

        db.add(Product(**payload))
        count += 1

    db.commit()
    logger.info("Imported %d new products.", count)
    return count


def main():
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        import_dummy_products(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
