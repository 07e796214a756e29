"""Schema management for the catalog database."""

from loguru import logger
from sqlmodel import SQLModel

from src.catalog.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, database: DbSessionService):
        self._engine = database.engine

    def create_all(self) -> None:
        """Create all database tables."""
        from src.catalog.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        from src.catalog.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.info("Database tables dropped.")
