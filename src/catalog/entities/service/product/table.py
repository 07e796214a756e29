"""Product database table model."""

from decimal import Decimal

from sqlalchemy import Column, Numeric
from sqlmodel import Field, SQLModel

RATE_PRECISION = 18
RATE_SCALE = 2


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str = ""
    barcode: str = ""
    description: str = ""
    rate: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(RATE_PRECISION, RATE_SCALE), nullable=False),
    )
