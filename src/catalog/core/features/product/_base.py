from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.mediator import Request, RequestHandler
from src.catalog.core.services.database import DbSessionService
from src.catalog.entities.service.product import Product, ProductRepository


class ProductRequestHandler[TRequest: Request[Any], TResult](
    RequestHandler[TRequest, TResult]
):
    """Base for handlers working against the product repository.

    Each ``handle`` call gets its own session from
    ``DbSessionService.session_scope``. A failure inside the block rolls the
    session back, and database errors are logged on the way out.
    """

    def __init__(self, database: DbSessionService) -> None:
        self._database = database

    @contextmanager
    def repository(self) -> Iterator[ProductRepository]:
        with self._database.session_scope() as session:
            yield ProductRepository(session)

    @staticmethod
    def get_or_raise(repository: ProductRepository, product_id: int) -> Product:
        product = repository.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product
