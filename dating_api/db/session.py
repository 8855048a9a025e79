# dating_api/db/session.py

from __future__ import annotations

from typing import Any, Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dating_api.db.models import Base

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def create_db_engine(url: str, *, echo: bool = False) -> Engine:
    """
    Build an engine for ``url``.

    SQLite needs ``check_same_thread=False`` in a multi-threaded web app, and
    an in-memory database must be pinned to one connection or every new
    connection would see an empty schema.
    """
    connect_args: dict[str, Any] = {}
    kwargs: dict[str, Any] = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    return create_engine(url, echo=echo, connect_args=connect_args, **kwargs)


def create_session_factory(bind: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=bind,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        class_=Session,
    )


def init_db(bind: Engine) -> None:
    """
    Create all tables that do not exist yet.
    """
    Base.metadata.create_all(bind=bind)


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------


def get_session(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a request-scoped session from the
    application's session factory (``app.state.session_factory``, set by
    ``create_app``) and ensures it is closed afterwards.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "get_session",
]
