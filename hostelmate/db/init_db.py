"""Database initialization utilities."""
import logging
from typing import Optional

from sqlalchemy.engine import Engine

from hostelmate.models import Base

logger = logging.getLogger(__name__)


def _resolve_engine(bind: Optional[Engine]) -> Engine:
    if bind is not None:
        return bind
    from hostelmate.db.session import engine
    return engine


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables that do not exist yet.

    Note: This is suitable for development/testing only.
    """
    engine = _resolve_engine(bind)
    try:
        Base.metadata.create_all(bind=engine)
        logger.info(f"Database initialized with {len(Base.metadata.tables)} tables")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise


def drop_db(bind: Optional[Engine] = None) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Use with caution.
    """
    engine = _resolve_engine(bind)
    try:
        Base.metadata.drop_all(bind=engine)
        logger.warning("All database tables dropped")
    except Exception as e:
        logger.error(f"Error dropping database: {e}")
        raise


def reset_db(bind: Optional[Engine] = None) -> None:
    """
    Reset the database by dropping and recreating all tables.

    WARNING: This will delete all data! Use with caution.
    """
    logger.warning("Resetting database...")
    drop_db(bind)
    init_db(bind)
    logger.info("Database reset complete")
