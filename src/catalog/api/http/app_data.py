from dataclasses import dataclass

from src.catalog.core.mediator import Mediator
from src.catalog.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    mediator: Mediator
