# backend/routes/products.py
import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from repositories.product_repository import ProductRepository
from services.product_service import ProductService
from schemas.product import ErrorResponse, PaginatedResponse, ProductDTO

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])

# Documented error bodies shared by the endpoints below
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid product data"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product not found"}}
_SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Internal server error"}}


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db))


# =========================
# LISTA PRODUKTÓW
# =========================
@router.get(
    "",
    response_model=PaginatedResponse[ProductDTO],
    summary="Retrieve paginated list of products",
    description="Returns a paginated list of products based on the given page number and size.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid page number or size"},
        **_SERVER_ERROR,
    },
)
def list_products(
    page: int = Query(0, ge=0, description="The page number to retrieve", examples=[0]),
    size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE,
        description="The number of products per page", examples=[10],
    ),
    service: ProductService = Depends(get_product_service),
):
    logger.info("Retrieving products with page number %s and size %s", page, size)
    return service.get_products(page, size)


# =========================
# POJEDYNCZY PRODUKT
# =========================
@router.get(
    "/{product_id}",
    response_model=ProductDTO,
    summary="Retrieve a product by ID",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    logger.info("Retrieving product with id %s", product_id)
    return service.get_product(product_id)


# =========================
# DODAWANIE PRODUKTU
# =========================
@router.post(
    "",
    response_model=ProductDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Save a new product",
    description="Saves a new product based on the given product data transfer object.",
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
)
def save_product(payload: ProductDTO, service: ProductService = Depends(get_product_service)):
    logger.info("Saving product: %s", payload)
    return service.save_product(payload)


# =========================
# AKTUALIZACJA PRODUKTU (PUT - Pełna)
# =========================
@router.put(
    "/{product_id}/update",
    response_model=ProductDTO,
    summary="Update an existing product",
    description="Updates an existing product based on the given product ID and data transfer object.",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
def update_product(
    product_id: int,
    payload: ProductDTO,
    service: ProductService = Depends(get_product_service),
):
    logger.info("Updating product with id %s: %s", product_id, payload)
    return service.update_product(product_id, payload)


# =========================
# USUWANIE
# =========================
@router.delete(
    "/{product_id}/delete",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a product by ID",
    description="Deletes a product based on the given product ID.",
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    logger.info("Deleting product with id %s", product_id)
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
