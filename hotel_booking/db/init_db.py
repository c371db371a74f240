"""Database initialization utilities."""
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from hotel_booking.core.logging import get_logger
from hotel_booking.db.base import Base
from hotel_booking.db.session import engine as default_engine

logger = get_logger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create any missing tables.

    Suitable for development and tests; existing tables are left untouched.
    """
    engine = engine or default_engine
    existing_tables = set(inspect(engine).get_table_names())
    Base.metadata.create_all(bind=engine)
    created = set(inspect(engine).get_table_names()) - existing_tables
    if created:
        logger.info(f"Database tables created: {', '.join(sorted(created))}")
    else:
        logger.info(f"Database already initialized with {len(existing_tables)} tables")


def drop_db(engine: Optional[Engine] = None) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data.
    """
    Base.metadata.drop_all(bind=engine or default_engine)
    logger.warning("All database tables dropped")

