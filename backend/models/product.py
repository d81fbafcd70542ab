# backend/models/product.py
from sqlalchemy import Column, Integer, String, Float, Text, CheckConstraint
from database import Base

# Model Product
# A single catalog entry. The id is assigned by the database on insert
# and never changes afterwards; all other columns are replaced on update.
class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_positive"),
        CheckConstraint("quantity > 0", name="ck_products_quantity_positive"),
    )

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(30), nullable=False)

    # Unbounded text, minimum length is enforced at the API boundary.
    description = Column(Text, nullable=False)

    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"Product(id={self.id!r}, name={self.name!r}, "
            f"price={self.price!r}, quantity={self.quantity!r})"
        )
