"""FastAPI dependency implementations."""

from fastapi import Request, Response

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.mediator import Mediator
from src.catalog.core.services import DbSessionService

SUPPORTED_API_VERSIONS = ("1.0",)


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_mediator(request: Request) -> Mediator:
    """Get the process-wide mediator."""
    return get_app_dependencies(request).mediator


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    return get_app_dependencies(request).database_service


def report_api_versions(response: Response) -> None:
    """Advertise the API versions this service supports."""
    response.headers["api-supported-versions"] = ", ".join(SUPPORTED_API_VERSIONS)
