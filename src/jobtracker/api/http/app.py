"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse
import uvicorn

from src.jobtracker.api.http.app_data import ApplicationDependencies
from src.jobtracker.api.http.routers import applications, auth, jobs, notes, preferences
from src.jobtracker.api.utils.app_startup import configure_logging
from src.jobtracker.core.errors import (
    ConflictError,
    ConstraintViolation,
    EntityNotFoundError,
    OwnershipError,
    ProviderError,
    ValidationError,
)
from src.jobtracker.core.services import AuthService, DbManageService, DbSessionService
from src.jobtracker.runtime.context import get_config

__all__ = ["app", "create_app", "main", "startup", "shutdown"]


# --- Lifecycle hooks ---
async def startup(app: FastAPI) -> None:
    config = get_config()
    configure_logging()
    logger.info("Starting up application in {} environment", config.app.environment)

    # Dependencies injected ahead of time (tests) are used as they are
    if getattr(app.state, "app_dependencies", None) is not None:
        return

    # Fails fast with ConfigurationError when the provider is not configured
    auth_service = AuthService(config.identity)
    database_service = DbSessionService(config.database)
    DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        auth_service=auth_service,
        identity_config=config.identity,
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is None:
        return
    await app_dependencies.auth_service.aclose()
    app_dependencies.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


# --- Error mapping ---
def _error_response(request: Request, status_code: int, detail: str) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "request_id": request_id},
    )


async def _validation_error(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(request, 400, str(exc))


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(request, 404, str(exc))


async def _conflict(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(request, 409, str(exc))


async def _constraint_violation(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("Store rejected change: {}", getattr(exc, "orig", exc))
    return _error_response(request, 409, "Request conflicts with stored data")


async def _forbidden(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(request, 403, str(exc))


async def _provider_error(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(request, 400, str(exc))


def _register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(ConflictError, _conflict)
    app.add_exception_handler(ConstraintViolation, _constraint_violation)
    app.add_exception_handler(OwnershipError, _forbidden)
    app.add_exception_handler(ProviderError, _provider_error)


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.bind(
            status_code=response.status_code,
            duration_ms=round(duration_ms, 1),
        ).info("request.end")
        response.headers.setdefault("X-Request-ID", request_id)
        return response


def create_app() -> FastAPI:
    config = get_config()
    is_production = config.app.environment == "production"

    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app = FastAPI(
        title="Job Tracker",
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)
    _register_exception_handlers(app)

    api = APIRouter(prefix="/api")
    for module in (auth, jobs, applications, notes, preferences):
        api.include_router(module.router)
    app.include_router(api)

    @app.get("/health")
    async def health(request: Request) -> dict[str, str]:
        """Liveness probe; reports database connectivity when it is wired up."""
        app_deps: ApplicationDependencies | None = getattr(
            request.app.state, "app_dependencies", None
        )
        database = "unknown"
        if app_deps is not None:
            database = "healthy" if app_deps.database_service.health_check() else "unhealthy"
        return {"status": "healthy", "database": database}

    return app


app = create_app()


def main() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    config = get_config()
    uvicorn.run(
        "src.jobtracker.api.http.app:app",
        host=config.app.host,
        port=config.app.port,
        reload=config.app.environment == "development",
        log_config=None,  # Loguru owns logging once the lifespan starts
    )
