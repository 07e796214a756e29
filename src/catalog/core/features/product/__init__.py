"""Product commands, queries and their handlers."""

from src.catalog.core.mediator import Mediator
from src.catalog.core.services.database import DbSessionService

from .commands import (
    CreateProductCommand,
    CreateProductCommandHandler,
    DeleteProductByIdCommand,
    DeleteProductByIdCommandHandler,
    UpdateProductCommand,
    UpdateProductCommandHandler,
)
from .queries import (
    GetAllProductsQuery,
    GetAllProductsQueryHandler,
    GetProductByIdQuery,
    GetProductByIdQueryHandler,
)


def register_product_handlers(mediator: Mediator, database: DbSessionService) -> None:
    """Register one handler per product request type."""
    for handler_cls in (
        CreateProductCommandHandler,
        GetAllProductsQueryHandler,
        GetProductByIdQueryHandler,
        UpdateProductCommandHandler,
        DeleteProductByIdCommandHandler,
    ):
        mediator.register(handler_cls(database))


__all__ = [
    "CreateProductCommand",
    "CreateProductCommandHandler",
    "DeleteProductByIdCommand",
    "DeleteProductByIdCommandHandler",
    "GetAllProductsQuery",
    "GetAllProductsQueryHandler",
    "GetProductByIdQuery",
    "GetProductByIdQueryHandler",
    "UpdateProductCommand",
    "UpdateProductCommandHandler",
    "register_product_handlers",
]
