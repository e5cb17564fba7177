"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.jobtracker.core.services.database.db_utils import enable_sqlite_foreign_keys
from src.jobtracker.runtime.config.config_data import DatabaseConfig
from src.jobtracker.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None, engine: Engine | None = None):
        """Initialize the shared database engine and session factory.

        Args:
            db_config: Database settings; defaults to the current configuration.
            engine: Pre-built engine (tests); ``db_config`` is ignored when given.
        """
        logger.info("Setting up database engine and session factory")
        self._config = db_config or get_config().database

        if engine is None:
            engine = create_engine(self._config.url, **self._engine_kwargs())
        self._engine = engine
        enable_sqlite_foreign_keys(self._engine)

    def _engine_kwargs(self) -> dict[str, Any]:
        engine_kwargs: dict[str, Any] = {
            "echo": self._config.echo,
            "pool_pre_ping": True,  # Validate connections before use
        }

        if self._config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,  # Sessions are handed across FastAPI threads
                "timeout": 20,  # Lock timeout
            }
            if get_config().app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
        else:
            engine_kwargs.update(
                {
                    "pool_size": self._config.pool_size,
                    "max_overflow": self._config.max_overflow,
                    "pool_timeout": self._config.pool_timeout,
                    "pool_recycle": self._config.pool_recycle,
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
            expire_on_commit=False,  # Entities stay readable after the request commits
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Unit of work: commit on success, roll back and re-raise on failure."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
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
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def dispose(self) -> None:
        self._engine.dispose()
