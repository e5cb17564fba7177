"""FastAPI dependency implementations."""

from collections.abc import Iterator
from uuid import UUID

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from loguru import logger
from sqlmodel import Session

from src.jobtracker.api.http.app_data import ApplicationDependencies
from src.jobtracker.core.errors import ConfigurationError
from src.jobtracker.core.security import InvalidTokenError, verify_access_token
from src.jobtracker.core.services import (
    ApplicationNoteService,
    AuthService,
    JobApplicationService,
    JobService,
    PreferencesService,
)

_bearer = HTTPBearer(auto_error=False)


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a session for one request; uncommitted changes are discarded on close."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_auth_service(request: Request) -> AuthService:
    """Get the shared auth bridge instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.auth_service


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Missing Bearer token")
    return credentials.credentials


def get_current_user_id(
    request: Request, token: str = Depends(get_bearer_token)
) -> UUID:
    """Authenticate the request and return the caller's user id."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    try:
        return verify_access_token(token, app_deps.identity_config)
    except ConfigurationError as exc:
        logger.error("Cannot verify access tokens: {}", exc)
        raise HTTPException(status_code=500, detail="JWT signing secret not configured") from exc
    except InvalidTokenError as exc:
        logger.info("Rejected access token: {}", exc)
        raise HTTPException(status_code=401, detail="Invalid access token") from exc


def get_job_service(
    db: Session = Depends(get_db_session),
    user_id: UUID = Depends(get_current_user_id),
) -> JobService:
    return JobService(db, user_id)


def get_job_application_service(
    db: Session = Depends(get_db_session),
    user_id: UUID = Depends(get_current_user_id),
) -> JobApplicationService:
    return JobApplicationService(db, user_id)


def get_application_note_service(
    db: Session = Depends(get_db_session),
    user_id: UUID = Depends(get_current_user_id),
) -> ApplicationNoteService:
    return ApplicationNoteService(db, user_id)


def get_preferences_service(
    db: Session = Depends(get_db_session),
    user_id: UUID = Depends(get_current_user_id),
) -> PreferencesService:
    return PreferencesService(db, user_id)
