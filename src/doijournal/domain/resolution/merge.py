"""Merge a journal candidate into the repository.

Stored records are authoritative: a candidate may fill gaps (an empty title,
identifiers the record does not list yet) but never overwrites a value that is
already present. Nothing is written when the candidate adds nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from doijournal.domain.model import JournalRecord, unique_identifiers

from .errors import JournalInvariantError

if TYPE_CHECKING:
    from doijournal.domain.model import JournalCandidate, JournalId
    from doijournal.domain.ports.persistence import JournalRepository

log = getLogger(__name__)


class MergeAction(StrEnum):
    """What the merge step did with the candidate."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    INSUFFICIENT_INFORMATION = "insufficient_information"


@dataclass(slots=True, kw_only=True)
class CreatedJournal:
    record: JournalRecord
    action: Literal[MergeAction.CREATED] = MergeAction.CREATED


@dataclass(slots=True, kw_only=True)
class UpdatedJournal:
    record: JournalRecord
    title_filled: bool = False
    added_identifiers: int = 0
    action: Literal[MergeAction.UPDATED] = MergeAction.UPDATED


@dataclass(slots=True, kw_only=True)
class UnchangedJournal:
    record: JournalRecord
    action: Literal[MergeAction.UNCHANGED] = MergeAction.UNCHANGED


@dataclass(slots=True, kw_only=True)
class InsufficientInformation:
    """No stored journal matched and the candidate cannot seed a new one."""

    reason: str = "missing_title_or_identifiers"
    record: None = None
    action: Literal[MergeAction.INSUFFICIENT_INFORMATION] = MergeAction.INSUFFICIENT_INFORMATION


type MergeOutcome = CreatedJournal | UpdatedJournal | UnchangedJournal | InsufficientInformation


def merge_candidate(
    candidate: JournalCandidate,
    match: JournalId | None,
    repository: JournalRepository,
) -> MergeOutcome:
    """Create, update or reuse a journal record for ``candidate``."""

    if match is None:
        return _create(candidate, repository)

    existing = repository.read(match)
    if existing is None:
        message = (
            f"Journal {match} was found, but the record could not be retrieved. "
            "This should never happen."
        )
        log.error(message)
        raise JournalInvariantError(message)

    return _fill_gaps(existing, candidate, repository)


def _create(candidate: JournalCandidate, repository: JournalRepository) -> MergeOutcome:
    if not candidate.is_complete:
        log.debug("Not enough information to create a journal for %r", candidate.title)
        return InsufficientInformation()
    record = repository.create(JournalRecord.from_candidate(candidate))
    log.info("Created journal %s (%s)", record.id, record.title)
    return CreatedJournal(record=record)


def _fill_gaps(
    existing: JournalRecord,
    candidate: JournalCandidate,
    repository: JournalRepository,
) -> MergeOutcome:
    title_filled = False
    if not existing.has_title and candidate.has_title:
        existing.title = candidate.title
        title_filled = True

    merged = unique_identifiers((*existing.identifiers, *candidate.identifiers))
    added_identifiers = len(merged) - len(unique_identifiers(existing.identifiers))
    if added_identifiers:
        existing.identifiers = list(merged)

    if not title_filled and not added_identifiers:
        return UnchangedJournal(record=existing)

    repository.update(existing)
    log.info(
        "Updated journal %s: title_filled=%s, added_identifiers=%d",
        existing.id,
        title_filled,
        added_identifiers,
    )
    return UpdatedJournal(
        record=existing,
        title_filled=title_filled,
        added_identifiers=added_identifiers,
    )
