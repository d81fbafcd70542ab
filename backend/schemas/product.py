# backend/schemas/product.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# External representation of a product, used for both requests and responses.
# The id is read-only: it is ignored on create and on update.
class ProductDTO(ORMBase):
    id: Optional[int] = Field(None, description="Identyfikator nadany przez bazę danych", examples=[1])
    name: str = Field(..., min_length=3, max_length=30, description="Nazwa produktu", examples=["Widget"])
    description: str = Field(..., min_length=8, description="Opis produktu", examples=["A simple widget"])
    price: float = Field(..., gt=0, allow_inf_nan=False, description="Cena > 0", examples=[9.99])
    quantity: int = Field(..., gt=0, description="Ilość > 0", examples=[5])

    @field_validator("name", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


# Page of items with position metadata, serialized with camelCase keys
class PaginatedResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(populate_by_name=True)

    content: List[T]
    total_pages: int = Field(alias="totalPages")
    total_elements: int = Field(alias="totalElements")
    number: int
    size: int


# Single field-level constraint violation
class FieldViolation(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    detail: str
    violations: List[FieldViolation] = []
