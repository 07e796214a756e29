"""Commands that change the product catalog."""

from dataclasses import dataclass
from decimal import Decimal

from loguru import logger

from src.catalog.core.features.product._base import ProductRequestHandler
from src.catalog.core.mediator import Command
from src.catalog.entities.service.product import Product


@dataclass(frozen=True)
class CreateProductCommand(Command[int]):
    name: str
    barcode: str
    description: str
    rate: Decimal


@dataclass(frozen=True)
class UpdateProductCommand(Command[int]):
    id: int
    name: str
    barcode: str
    description: str
    rate: Decimal


@dataclass(frozen=True)
class DeleteProductByIdCommand(Command[int]):
    id: int


class CreateProductCommandHandler(ProductRequestHandler[CreateProductCommand, int]):
    """Insert a new product; the store assigns its id."""

    request_type = CreateProductCommand

    def handle(self, request: CreateProductCommand) -> int:
        product = Product(
            name=request.name,
            barcode=request.barcode,
            description=request.description,
            rate=request.rate,
        )
        with self.repository() as repository:
            created = repository.add(product)
            repository.commit()

        logger.info("Created product {}", created.id)
        return created.id


class UpdateProductCommandHandler(ProductRequestHandler[UpdateProductCommand, int]):
    """Overwrite every mutable field of an existing product.

    The id in the command is trusted; matching it against the route is the
    caller's job.
    """

    request_type = UpdateProductCommand

    def handle(self, request: UpdateProductCommand) -> int:
        with self.repository() as repository:
            product = self.get_or_raise(repository, request.id)
            product.name = request.name
            product.barcode = request.barcode
            product.description = request.description
            product.rate = request.rate
            repository.update(product)
            repository.commit()

        logger.info("Updated product {}", request.id)
        return request.id


class DeleteProductByIdCommandHandler(
    ProductRequestHandler[DeleteProductByIdCommand, int]
):
    request_type = DeleteProductByIdCommand

    def handle(self, request: DeleteProductByIdCommand) -> int:
        with self.repository() as repository:
            product = self.get_or_raise(repository, request.id)
            repository.remove(product.id)
            repository.commit()

        logger.info("Deleted product {}", product.id)
        return product.id
