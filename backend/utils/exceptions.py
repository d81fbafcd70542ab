# backend/utils/exceptions.py
from typing import List, Optional

from schemas.product import FieldViolation


class ProductNotFoundError(Exception):
    """Raised when no product exists under the requested id."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with id {product_id} not found")


class ProductValidationError(Exception):
    """Raised when input breaks one or more field constraints."""

    def __init__(self, violations: List[FieldViolation]):
        self.violations = violations
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Validation failed for: {fields}")


class StoreError(Exception):
    """Persistence failure (connectivity, constraint violation in the database)."""

    def __init__(self, message: str, original: Optional[Exception] = None):
        self.original = original
        super().__init__(message)
