"""
Database connection and session management for the content item store.
"""
from contextlib import contextmanager
from typing import Dict, Generator, Optional

import structlog
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from config.settings import settings
from .db_models import Base

logger = structlog.get_logger(__name__)


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, database_url: Optional[str] = None):
        """
        Initialize database manager.

        Args:
            database_url: SQLAlchemy database URL. If None, uses the
                         configured DATABASE_URL.
        """
        self.database_url = database_url or settings.database_url

        # check_same_thread=False lets one engine serve several threads
        if self.database_url.startswith('sqlite'):
            self.engine = create_engine(
                self.database_url,
                connect_args={'check_same_thread': False},
                echo=False
            )
        else:
            self.engine = create_engine(self.database_url, echo=False)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def create_tables(self):
        """Create all database tables."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("database_tables_created", database_url=self.database_url)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions.

        Automatically commits on success and rolls back on exception.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


_db_managers: Dict[str, DatabaseManager] = {}


def get_db_manager(database_url: Optional[str] = None) -> DatabaseManager:
    """
    Get or create the shared database manager for a database URL.

    Args:
        database_url: Optional database URL (configured DATABASE_URL if None)

    Returns:
        DatabaseManager instance, one per URL
    """
    database_url = database_url or settings.database_url
    if database_url not in _db_managers:
        _db_managers[database_url] = DatabaseManager(database_url)
    return _db_managers[database_url]
