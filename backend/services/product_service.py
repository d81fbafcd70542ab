# backend/services/product_service.py
"""Product use cases: pagination, create, update and delete."""

import logging
import math

from models.product import Product
from repositories.product_repository import MAX_INTEGER, ProductRepository
from schemas.product import FieldViolation, PaginatedResponse, ProductDTO
from utils.exceptions import ProductNotFoundError, ProductValidationError
from utils.validation import validate_product

logger = logging.getLogger(__name__)


def to_dto(product: Product) -> ProductDTO:
    """Copy a stored product into its wire representation."""
    return ProductDTO.model_construct(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        quantity=product.quantity,
    )


def to_entity(dto: ProductDTO) -> Product:
    """Copy a wire product into a table row object."""
    return Product(
        id=dto.id,
        name=dto.name,
        description=dto.description,
        price=dto.price,
        quantity=dto.quantity,
    )


def _ensure_valid(dto: ProductDTO) -> None:
    violations = validate_product(dto.model_dump(exclude={"id"}))
    if violations:
        raise ProductValidationError(violations)


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def get_products(self, page: int, size: int) -> PaginatedResponse[ProductDTO]:
        """
        Return one page of products.

        Args:
            page: Zero-based page number.
            size: Number of products per page, at least 1.

        Returns:
            PaginatedResponse with the page content and totals.

        Raises:
            ProductValidationError: If page is negative, size is below 1 or
                the resulting offset does not fit in a database integer.
        """
        violations = []
        if page < 0:
            violations.append(FieldViolation(field="page", message="must be greater than or equal to 0"))
        if size < 1:
            violations.append(FieldViolation(field="size", message="must be greater than or equal to 1"))
        elif page * size > MAX_INTEGER:
            violations.append(FieldViolation(field="page", message="is too large for the given size"))
        if violations:
            raise ProductValidationError(violations)

        items, total = self.repository.find_page(offset=page * size, limit=size)
        return PaginatedResponse[ProductDTO](
            content=[to_dto(p) for p in items],
            total_pages=math.ceil(total / size),
            total_elements=total,
            number=page,
            size=size,
        )

    def get_product(self, product_id: int) -> ProductDTO:
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return to_dto(product)

    def save_product(self, dto: ProductDTO) -> ProductDTO:
        """Persist a new product. Any client supplied id is discarded."""
        _ensure_valid(dto)
        entity = to_entity(dto)
        entity.id = None
        saved = self.repository.save(entity)
        logger.info("Product %s created", saved.id)
        return to_dto(saved)

    def update_product(self, product_id: int, dto: ProductDTO) -> ProductDTO:
        """
        Replace name, description, price and quantity of an existing product.

        Raises:
            ProductValidationError: If the new values break a field constraint.
            ProductNotFoundError: If there is no product with the given id.
        """
        _ensure_valid(dto)
        product = self.repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.quantity = dto.quantity

        return to_dto(self.repository.save(product))

    def delete_product(self, product_id: int) -> None:
        if not self.repository.delete_by_id(product_id):
            raise ProductNotFoundError(product_id)
