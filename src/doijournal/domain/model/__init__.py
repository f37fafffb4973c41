"""Public domain model surface."""

from __future__ import annotations

from doijournal.domain.model.enums import IssnKind, JournalAttribute
from doijournal.domain.model.identifiers import TypedIdentifier, unique_identifiers
from doijournal.domain.model.journal import JournalCandidate, JournalId, JournalRecord

__all__ = [
    "IssnKind",
    "JournalAttribute",
    "JournalCandidate",
    "JournalId",
    "JournalRecord",
    "TypedIdentifier",
    "unique_identifiers",
]
