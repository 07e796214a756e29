"""Product API router with CRUD operations.

Each endpoint builds a command or query and hands it to the mediator; it
never touches the store itself.
"""

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.catalog.api.http.deps import get_mediator, report_api_versions
from src.catalog.core.features.product import (
    CreateProductCommand,
    DeleteProductByIdCommand,
    GetAllProductsQuery,
    GetProductByIdQuery,
    UpdateProductCommand,
)
from src.catalog.core.mediator import Mediator
from src.catalog.entities.service.product import Product

router = APIRouter(
    prefix="/product",
    tags=["product"],
    dependencies=[Depends(report_api_versions)],
)


class ProductCreate(BaseModel):
    """Request body for creating a product."""

    name: str = ""
    barcode: str = ""
    description: str = ""
    rate: Decimal = Decimal("0")


class ProductUpdate(ProductCreate):
    """Request body for updating a product; must repeat the route id."""

    id: int


@router.post("", response_model=int)
def create_product(
    body: ProductCreate,
    mediator: Mediator = Depends(get_mediator),
) -> int:
    """Create a new product."""
    return mediator.send(CreateProductCommand(**body.model_dump()))


@router.get("", response_model=list[Product])
def list_products(mediator: Mediator = Depends(get_mediator)) -> list[Product]:
    """List all products."""
    return mediator.send(GetAllProductsQuery())


@router.get("/{id}", response_model=Product)
def get_product(id: int, mediator: Mediator = Depends(get_mediator)) -> Product:
    """Get a product by ID."""
    return mediator.send(GetProductByIdQuery(id=id))


@router.put("/{id}", response_model=int)
def update_product(
    id: int,
    body: ProductUpdate,
    mediator: Mediator = Depends(get_mediator),
) -> int:
    """Update a product."""
    if id != body.id:
        raise HTTPException(
            status_code=400, detail="Route id and body id do not match."
        )
    return mediator.send(UpdateProductCommand(**body.model_dump()))


@router.delete("/{id}", response_model=int)
def delete_product(id: int, mediator: Mediator = Depends(get_mediator)) -> int:
    """Delete a product."""
    return mediator.send(DeleteProductByIdCommand(id=id))
