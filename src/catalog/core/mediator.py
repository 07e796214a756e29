"""Command/query dispatch.

Every operation of the application layer is expressed as a request value:
a ``Command`` when it changes state, a ``Query`` when it only reads. Each
concrete request type is served by exactly one ``RequestHandler``, and the
``Mediator`` routes a request to that handler by the request's own type.

Usage:
    @dataclass(frozen=True)
    class GetProductByIdQuery(Query[Product]):
        id: int

    class GetProductByIdQueryHandler(RequestHandler[GetProductByIdQuery, Product]):
        request_type = GetProductByIdQuery

        def handle(self, request: GetProductByIdQuery) -> Product:
            ...

    mediator = Mediator()
    mediator.register(GetProductByIdQueryHandler(...))
    product = mediator.send(GetProductByIdQuery(id=1))
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar

from loguru import logger

from src.catalog.core.exceptions import DuplicateHandlerError, HandlerNotRegisteredError


class Request[TResult]:
    """A request value whose handler produces a ``TResult``."""


class Command[TResult](Request[TResult]):
    """A request that changes state."""


class Query[TResult](Request[TResult]):
    """A read-only request."""


class RequestHandler[TRequest: Request[Any], TResult](ABC):
    # concrete handlers name the request type they serve
    request_type: ClassVar[type[Request[Any]]]

    @abstractmethod
    def handle(self, request: TRequest) -> TResult: ...


class Mediator:
    """Routes each request to the single handler registered for its type."""

    def __init__(self, handlers: Iterable[RequestHandler[Any, Any]] = ()) -> None:
        self._handlers: dict[type[Request[Any]], RequestHandler[Any, Any]] = {}
        for handler in handlers:
            self.register(handler)

    def register(self, handler: RequestHandler[Any, Any]) -> None:
        """Register ``handler`` for its ``request_type``.

        Raises:
            DuplicateHandlerError: If the request type already has a handler.
        """
        request_type = handler.request_type
        if request_type in self._handlers:
            raise DuplicateHandlerError(request_type)
        self._handlers[request_type] = handler
        logger.debug(
            "Registered {} for {}", type(handler).__name__, request_type.__name__
        )

    def is_registered(self, request_type: type[Request[Any]]) -> bool:
        return request_type in self._handlers

    @property
    def registered_types(self) -> frozenset[type[Request[Any]]]:
        return frozenset(self._handlers)

    def send[TResult](self, request: Request[TResult]) -> TResult:
        """Dispatch ``request`` and return its handler's result unchanged.

        Raises:
            HandlerNotRegisteredError: If nothing handles ``type(request)``.
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            raise HandlerNotRegisteredError(type(request))
        return handler.handle(request)
