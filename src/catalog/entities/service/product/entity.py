"""Entity: Product."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

# Prices travel as JSON numbers but are handled as Decimal in Python.
Rate = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class Product(BaseModel):
    """Product entity representing a sellable item in the catalog.

    This is the domain model handed to and returned from the application
    layer. The identifier is assigned by the store when the product is first
    persisted and is ``None`` until then.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(
        default=None, description="Store-generated identifier of the product"
    )
    name: str = Field(default="", description="Name")
    barcode: str = Field(default="", description="Barcode")
    description: str = Field(default="", description="Description")
    rate: Rate = Field(default=Decimal("0"), description="Unit price")
