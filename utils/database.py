"""
Database utilities and engine management.

This module provides the core database engine that can be used by any layer:
- API routes
- Services
- Repositories
- Scripts

No dependencies on higher-level modules (api, services).
"""

from functools import lru_cache
from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import create_engine, Session, SQLModel

from config.settings import settings


@lru_cache()
def get_engine() -> Engine:
    """
    Get cached database engine.

    Returns:
        SQLAlchemy engine singleton

    Note:
        postgresql:// URLs are switched to the psycopg (v3) driver.
        SQLite connections are shared across the request threadpool.
    """
    db_url = settings.DATABASE_URL
    if db_url.startswith("postgresql://"):
        db_url = db_url.replace("postgresql://", "postgresql+psycopg://", 1)

    if db_url.startswith("sqlite"):
        return create_engine(db_url, connect_args={"check_same_thread": False})

    return create_engine(
        db_url,
        connect_args={
            "connect_timeout": 10,  # Fail fast if the database is unreachable
        },
        pool_pre_ping=True,  # Verify connection before use
        pool_recycle=300,
        pool_size=5,
        max_overflow=5,
        pool_timeout=30,
    )


def create_db_and_tables(engine: Engine = None) -> None:
    """Create all tables registered on SQLModel metadata (dev/test only; prod uses Alembic)."""
    import models  # noqa: F401  registers tables on the metadata

    SQLModel.metadata.create_all(engine or get_engine())


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields:
        SQLModel Session that auto-closes after request

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            ...
    """
    engine = get_engine()
    with Session(engine) as session:
        yield session
