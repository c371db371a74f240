"""Database session management."""
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from hotel_booking.config.settings import settings


def build_engine(url: str = None, **kwargs):
    """Create an engine for the configured URL with backend-appropriate options."""
    url = url or settings.get_database_url()
    options = {"pool_pre_ping": True, "echo": settings.DB_ECHO}
    if url.startswith("sqlite"):
        # Request handlers run in a thread pool
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_POOL_OVERFLOW
    options.update(kwargs)
    return create_engine(url, **options)


engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that yields a database session.

    Usage in FastAPI endpoints:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
