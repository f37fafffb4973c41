"""Ports for persisting journal records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from doijournal.domain.model import JournalAttribute, JournalId, JournalRecord


class JournalNotFoundError(LookupError):
    """Raised when updating a journal record that no longer exists."""


@runtime_checkable
class JournalRepository(Protocol):
    """Persistence contract for journal records.

    Implementations must be immediately consistent with their own query results:
    an id returned by ``find_by_attribute`` can be read back right away.
    """

    def find_by_attribute(self, attribute: JournalAttribute, value: str) -> set[JournalId]:
        """Return ids of records whose attribute equals (or, for sets, contains) ``value``."""
        ...

    def read(self, journal_id: JournalId) -> JournalRecord | None: ...

    def create(self, record: JournalRecord) -> JournalRecord:
        """Persist a new record and return it with its id populated."""
        ...

    def update(self, record: JournalRecord) -> None:
        """Overwrite the stored record; raise ``JournalNotFoundError`` if it is gone."""
        ...
