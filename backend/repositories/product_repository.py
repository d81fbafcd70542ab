# backend/repositories/product_repository.py
import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.product import Product
from utils.exceptions import StoreError

logger = logging.getLogger(__name__)

# Largest value a signed 64-bit INTEGER column can hold; drivers reject anything bigger
MAX_INTEGER = 2**63 - 1


def _storable_id(product_id: int) -> bool:
    return 0 < product_id <= MAX_INTEGER


class ProductRepository:
    """All reads and writes of the products table go through here."""

    def __init__(self, db: Session):
        self.db = db

    def find_page(self, offset: int, limit: int) -> Tuple[List[Product], int]:
        # Ordering by id keeps pages stable across requests
        try:
            query = self.db.query(Product).order_by(Product.id.asc())
            total = query.count()
            items = query.offset(offset).limit(limit).all()
        except SQLAlchemyError as e:
            raise self._store_error("Failed to read products", e)
        return items, total

    def find_by_id(self, product_id: int) -> Optional[Product]:
        if not _storable_id(product_id):
            return None
        try:
            return self.db.get(Product, product_id)
        except SQLAlchemyError as e:
            raise self._store_error(f"Failed to read product {product_id}", e)

    def save(self, product: Product) -> Product:
        """Insert when id is unset, otherwise overwrite the row with that id."""
        try:
            if product.id is None:
                self.db.add(product)
            else:
                product = self.db.merge(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as e:
            raise self._store_error("Failed to save product", e)
        return product

    def delete_by_id(self, product_id: int) -> bool:
        """Delete the row if present. Returns False when nothing was deleted."""
        if not _storable_id(product_id):
            return False
        try:
            deleted = (
                self.db.query(Product)
                .filter(Product.id == product_id)
                .delete(synchronize_session="fetch")
            )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._store_error(f"Failed to delete product {product_id}", e)
        return deleted > 0

    def _store_error(self, message: str, error: SQLAlchemyError) -> StoreError:
        self.db.rollback()
        logger.error("%s: %s", message, error)
        return StoreError(message, original=error)
