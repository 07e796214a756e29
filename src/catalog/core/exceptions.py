"""Application-level exceptions."""

from typing import Any


class CatalogError(Exception):
    """Base class for errors raised by the application layer."""


class NotFoundError(CatalogError):
    """The requested entity does not exist in the store."""

    def __init__(self, entity: str, key: Any) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key} not found.")


class ConfigurationError(CatalogError):
    """The application was wired incorrectly at startup."""


class HandlerNotRegisteredError(ConfigurationError):
    """No handler is registered for a request type."""

    def __init__(self, request_type: type) -> None:
        self.request_type = request_type
        super().__init__(f"No handler registered for {request_type.__name__}")


class DuplicateHandlerError(ConfigurationError):
    """A second handler was registered for the same request type."""

    def __init__(self, request_type: type) -> None:
        self.request_type = request_type
        super().__init__(
            f"A handler is already registered for {request_type.__name__}"
        )
