"""Read-only queries over the product catalog."""

from dataclasses import dataclass

from src.catalog.core.features.product._base import ProductRequestHandler
from src.catalog.core.mediator import Query
from src.catalog.entities.service.product import Product


@dataclass(frozen=True)
class GetAllProductsQuery(Query[list[Product]]):
    pass


@dataclass(frozen=True)
class GetProductByIdQuery(Query[Product]):
    id: int


class GetAllProductsQueryHandler(
    ProductRequestHandler[GetAllProductsQuery, list[Product]]
):
    """Return every product in insertion order."""

    request_type = GetAllProductsQuery

    def handle(self, request: GetAllProductsQuery) -> list[Product]:
        with self.repository() as repository:
            return list(repository.list_all())


class GetProductByIdQueryHandler(ProductRequestHandler[GetProductByIdQuery, Product]):
    request_type = GetProductByIdQuery

    def handle(self, request: GetProductByIdQuery) -> Product:
        with self.repository() as repository:
            return self.get_or_raise(repository, request.id)
