from dataclasses import dataclass

from ..application.services.user_directory_service import UserDirectoryService
from .config import Settings
from ..domain.ports.persistence import PersistenceGateway
from ..services.password_hasher import PasswordHasher


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared across the FastAPI application lifecycle."""

    settings: Settings
    persistence: PersistenceGateway
    password_hasher: PasswordHasher
    user_directory_service: UserDirectoryService
