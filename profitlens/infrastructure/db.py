"""Database infrastructure for ProfitLens.

This module exposes helpers to create and reuse the SQLAlchemy engine
connected to the local SQLite database holding transactions. It belongs to
the infrastructure layer because it deals with an external system.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from profitlens.application.ports.database import DatabaseEnginePort
from profitlens.utils.utils import get_project_root

DB_URL_ENV = "PROFITLENS_DB_URL"
DEFAULT_DB_FILENAME = "profitlens.db"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def default_db_url() -> str:
    """Return the SQLite URL of ``<project>/data/profitlens.db``."""
    data_dir = get_project_root() / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / DEFAULT_DB_FILENAME}"


def resolve_db_url() -> str:
    """Return the configured database URL, falling back to the local file."""
    try:
        return _get_env_var(DB_URL_ENV)
    except RuntimeError:
        return default_db_url()


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine with health checks enabled.
    """
    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
        connect_args=connect_args,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the transactions database.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _engine
    if _engine is None:
        _engine = _create_engine(resolve_db_url())
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy.

    Without an explicit URL the adapter shares the process-wide engine;
    with one it owns a dedicated engine.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_engine(self) -> Engine:
        """Get the engine for the transactions database.

        Returns:
            Engine: SQLAlchemy engine.
        """
        if self._db_url is None:
            return get_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "get_engine",
    "resolve_db_url",
    "default_db_url",
    "SqlAlchemyDatabaseEngineAdapter",
]
