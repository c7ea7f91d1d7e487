"""
Database client.

The engine and session factory live on an explicitly constructed Database
object owned by the process entry point (app.main.create_app). Nothing here
connects at import time.
"""
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns one SQLAlchemy engine and its session factory."""

    def __init__(self, url: str):
        self.url = url
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    def connect(self) -> None:
        if self.engine is not None:
            return

        kwargs = {"pool_pre_ping": True}
        if self.url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in self.url or self.url in ("sqlite://", "sqlite:///"):
                # Single shared connection so every session sees the same in-memory DB
                kwargs["poolclass"] = StaticPool

        self.engine = create_engine(self.url, **kwargs)
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info(f"Database engine created: dialect={self.engine.dialect.name}")

    def create_all(self) -> None:
        """Create any missing tables. Alembic owns the schema in production."""
        # Import models so they register with Base.metadata
        import app.db.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        import app.db.models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        if self._session_factory is None:
            raise RuntimeError("Database is not connected")
        return self._session_factory()

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Database engine disposed")
        self.engine = None
        self._session_factory = None
