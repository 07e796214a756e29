"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.catalog.runtime.config.config_data import DatabaseConfig
from src.catalog.runtime.context import get_config


class DbSessionService:
    """Owns the shared engine and hands out sessions bound to it.

    One instance is built at startup and passed to every handler that needs
    the store.
    """

    def __init__(self, database_config: DatabaseConfig | None = None):
        """Initialize the shared database engine."""
        main_config = get_config()
        db_config = database_config or main_config.database
        self._config = db_config

        logger.info(
            "Configuring database engine for environment: {}",
            main_config.app.environment,
        )
        engine_kwargs = self._get_engine_kwargs(db_config)

        if db_config.is_sqlite and main_config.app.environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )

        self._engine = create_engine(db_config.connection_string, **engine_kwargs)
        logger.info("Database engine initialized for {}", self._engine.url)

    @staticmethod
    def _get_engine_kwargs(db_config: DatabaseConfig) -> dict[str, Any]:
        """Get database-specific engine arguments."""
        engine_kwargs: dict[str, Any] = {"echo": db_config.echo}

        if db_config.is_sqlite:
            # Sessions are used from FastAPI's threadpool
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": 20,
            }
            if db_config.is_in_memory:
                # A single shared connection keeps the in-memory database alive
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,
            }
        )
        return engine_kwargs

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error.

        Database errors are logged before being re-raised; other exceptions
        only roll back.
        """
        db = self.get_session()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database transaction failed")
            raise
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database health check failed")
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
        logger.info("Database engine disposed")
