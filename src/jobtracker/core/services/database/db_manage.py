"""Schema creation for the application tables."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        # Importing the entities package registers every table on the metadata.
        import src.jobtracker.entities  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info(
            "Database initialized with tables: {}",
            sorted(SQLModel.metadata.tables),
        )
