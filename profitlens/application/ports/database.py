"""Database ports for ProfitLens.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the local transactions database."""

    def get_engine(self) -> Engine:
        """Get the engine for the transactions database.

        Returns:
            Engine: SQLAlchemy engine connected to the SQLite file.
        """


__all__ = ["DatabaseEnginePort"]
