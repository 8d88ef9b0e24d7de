"""Composition root for wiring infrastructure adapters."""

from profitlens.application.ports.database import DatabaseEnginePort
from profitlens.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from profitlens.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from profitlens.infrastructure.logging.logger import get_app_logger
from profitlens.infrastructure.settings import AppSettings
from profitlens.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def build_database_adapter(
    settings: AppSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or AppSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: AppSettings | None = None,
) -> TransactionsRepositoryPort:
    """Return a prepared transactions repository."""
    resolved = settings or AppSettings.from_env()
    resolved_db = db_port or build_database_adapter(resolved)
    repository = SqlAlchemyTransactionsRepository(
        resolved_db,
        logger=get_app_logger(),
        currency_code=resolved.currency_code,
    )
    repository.prepare()
    return repository


__all__ = ["build_database_adapter", "build_transactions_repository"]
