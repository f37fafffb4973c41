"""SQLAlchemy adapter package for doijournal."""

from __future__ import annotations

from .mappings import (
    create_all_tables,
    journal_identifier_table,
    journal_table,
    metadata,
)
from .repositories import SqlAlchemyJournalRepository
from .unit_of_work import (
    SqlAlchemyJournalUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyJournalRepository",
    "SqlAlchemyJournalUnitOfWork",
    "StartupError",
    "create_all_tables",
    "journal_identifier_table",
    "journal_table",
    "metadata",
    "shutdown",
    "startup",
]
