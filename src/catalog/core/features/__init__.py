"""Application features, wired into a single mediator at startup."""

from loguru import logger

from src.catalog.core.mediator import Mediator
from src.catalog.core.services.database import DbSessionService

from .product import register_product_handlers


def build_mediator(database: DbSessionService) -> Mediator:
    """Build the process-wide mediator with every feature's handlers."""
    mediator = Mediator()
    register_product_handlers(mediator, database)
    logger.info(
        "Mediator ready with {} handlers",
        len(mediator.registered_types),
    )
    return mediator


__all__ = ["build_mediator"]
