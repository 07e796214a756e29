"""Infrastructure services shared by the application layer."""

from .database import DbManageService, DbSessionService

__all__ = ["DbManageService", "DbSessionService"]
