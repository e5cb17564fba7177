from dataclasses import dataclass

from src.jobtracker.core.services import AuthService, DbSessionService
from src.jobtracker.runtime.config.config_data import IdentityProviderConfig


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    auth_service: AuthService
    identity_config: IdentityProviderConfig
