"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import FetchedWork, WorkFetcher
from .persistence import JournalNotFoundError, JournalRepository
from .unit_of_work import (
    JournalRepositories,
    JournalUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "FetchedWork",
    "JournalNotFoundError",
    "JournalRepositories",
    "JournalRepository",
    "JournalUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
    "WorkFetcher",
]
