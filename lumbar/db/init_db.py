"""
Database initialization.

Creates all tables and seeds the built-in catalog on first launch.
"""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

import lumbar.db.base  # noqa: F401
from lumbar.catalog.seed import seed_catalog
from lumbar.db.repositories import ExerciseRepository, RoutineRepository


def create_tables(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)
    logger.debug("Database tables ensured")


def init_db(engine: Engine, seed: bool = True) -> bool:
    """
    Initialize database schema and, optionally, seed data.

    Returns:
        True if the catalog was seeded by this call
    """
    create_tables(engine)
    if not seed:
        return False
    with Session(engine) as session:
        return seed_catalog(ExerciseRepository(session), RoutineRepository(session))
