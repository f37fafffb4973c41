"""DOI -> journal resolution workflow.

The service admits one lookup per DOI at a time, fetches work metadata, matches
the resulting candidate against stored journals and merges it inside a unit of
work. Every expected failure becomes a ``ResolutionOutcome``; only a
``JournalInvariantError`` escapes, because it signals a broken repository rather
than a bad request.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Final

from .doi import require_valid_doi
from .errors import (
    AdmissionConflictError,
    InvalidDoiError,
    JournalInvariantError,
    MetadataUnparsableError,
    UpstreamFetchError,
    WorkNotFoundError,
)
from .matching import find_best_match
from .merge import MergeAction, merge_candidate

if TYPE_CHECKING:
    from doijournal.domain.ports.fetching import FetchedWork, WorkFetcher
    from doijournal.domain.ports.unit_of_work import JournalUnitOfWork

    from .admission import AdmissionGate
    from .merge import MergeOutcome

log = getLogger(__name__)

UnitOfWorkFactory = Callable[[], "JournalUnitOfWork"]

NOT_FOUND_MESSAGE: Final[str] = "The resource for this DOI could not be found on Crossref."
INSUFFICIENT_MESSAGE: Final[str] = "Insufficient information to locate or specify a journal entry."


class OutcomeStatus(StrEnum):
    RESOLVED = "resolved"
    INVALID_DOI = "invalid-doi"
    ALREADY_IN_PROGRESS = "already-in-progress"
    NOT_FOUND_UPSTREAM = "not-found-upstream"
    UPSTREAM_FETCH_FAILURE = "upstream-fetch-failure"
    METADATA_UNPARSABLE = "metadata-unparsable"
    INSUFFICIENT_INFORMATION = "insufficient-information"
    INTERNAL_INVARIANT_VIOLATION = "internal-invariant-violation"


HTTP_STATUS_BY_OUTCOME: Final[dict[OutcomeStatus, int]] = {
    OutcomeStatus.RESOLVED: 200,
    OutcomeStatus.INVALID_DOI: 400,
    OutcomeStatus.ALREADY_IN_PROGRESS: 429,
    OutcomeStatus.NOT_FOUND_UPSTREAM: 404,
    OutcomeStatus.UPSTREAM_FETCH_FAILURE: 500,
    OutcomeStatus.METADATA_UNPARSABLE: 500,
    OutcomeStatus.INSUFFICIENT_INFORMATION: 422,
    OutcomeStatus.INTERNAL_INVARIANT_VIOLATION: 500,
}


@dataclass(slots=True, frozen=True, kw_only=True)
class ResolutionOutcome:
    """Definitive result of one resolution attempt."""

    status: OutcomeStatus
    doi: str | None
    journal_id: str | None = None
    action: MergeAction | None = None
    metadata: Mapping[str, object] | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.RESOLVED

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_OUTCOME[self.status]

    def to_payload(self) -> dict[str, object]:
        if self.ok:
            return {"journal-id": self.journal_id, "crossref": self.metadata}
        return {"error": self.message}

    @classmethod
    def failure(
        cls,
        status: OutcomeStatus,
        doi: str | None,
        message: str,
    ) -> ResolutionOutcome:
        return cls(status=status, doi=doi, message=message)


def _keep_id(journal_id: str) -> str:
    return journal_id


def admission_key(doi: str) -> str:
    """DOIs are case-insensitive, so lookups differing only in case share a lease."""
    return doi.lower()


@dataclass(slots=True)
class JournalResolutionService:
    fetcher: WorkFetcher
    unit_of_work_factory: UnitOfWorkFactory
    gate: AdmissionGate
    externalize_id: Callable[[str], str] = _keep_id

    def resolve(self, doi: str | None) -> ResolutionOutcome:
        try:
            verified = require_valid_doi(doi)
        except InvalidDoiError as exc:
            log.info("Rejecting invalid DOI %r", doi)
            return ResolutionOutcome.failure(OutcomeStatus.INVALID_DOI, doi, str(exc))

        key = admission_key(verified)
        try:
            lease = self.gate.acquire(key)
        except AdmissionConflictError:
            return ResolutionOutcome.failure(
                OutcomeStatus.ALREADY_IN_PROGRESS,
                verified,
                f"There is already an active request for {verified}; try again later.",
            )

        try:
            return self._resolve_admitted(verified)
        finally:
            self.gate.release(key, lease=lease)

    def _resolve_admitted(self, doi: str) -> ResolutionOutcome:
        log.debug("Servicing DOI %s", doi)
        try:
            work = self.fetcher(doi)
        except WorkNotFoundError:
            log.info("No Crossref work for %s", doi)
            return ResolutionOutcome.failure(
                OutcomeStatus.NOT_FOUND_UPSTREAM, doi, NOT_FOUND_MESSAGE
            )
        except UpstreamFetchError as exc:
            log.warning("Fetching metadata for %s failed: %s", doi, exc)
            return ResolutionOutcome.failure(OutcomeStatus.UPSTREAM_FETCH_FAILURE, doi, str(exc))
        except MetadataUnparsableError as exc:
            log.warning("Metadata for %s could not be parsed: %s", doi, exc)
            return ResolutionOutcome.failure(OutcomeStatus.METADATA_UNPARSABLE, doi, str(exc))

        merge = self._merge(work)
        if merge.record is None:
            return ResolutionOutcome.failure(
                OutcomeStatus.INSUFFICIENT_INFORMATION, doi, INSUFFICIENT_MESSAGE
            )

        journal_id = merge.record.id
        if journal_id is None:
            raise JournalInvariantError(f"Journal resolved for {doi} has no repository id")
        return ResolutionOutcome(
            status=OutcomeStatus.RESOLVED,
            doi=doi,
            journal_id=self.externalize_id(journal_id),
            action=merge.action,
            metadata=work.metadata,
        )

    def _merge(self, work: FetchedWork) -> MergeOutcome:
        with self.unit_of_work_factory() as uow:
            journals = uow.repositories.journals
            match = find_best_match(work.candidate, journals)
            merge = merge_candidate(work.candidate, match, journals)
            uow.commit()
        log.debug("Merge for %s finished with %s", work.doi, merge.action)
        return merge
