"""
Database engine and session management.

The engine is built explicitly by the process that owns it (the
application lifespan, a script, a test) and disposed by the same owner.
Request handlers receive short-lived sessions through :func:`get_db`.
"""

from typing import Generator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine for *database_url*.

    SQLite connections are shared with the threadpool FastAPI runs sync
    endpoints in; an in-memory database is pinned to a single connection
    so every session sees the same data.
    """
    kwargs: dict = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(database_url, **kwargs)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session bound to the engine opened at startup
    """
    with Session(request.app.state.engine) as session:
        yield session
