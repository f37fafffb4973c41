"""Ports for fetching external bibliographic metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from doijournal.domain.model import JournalCandidate


@dataclass(slots=True, frozen=True)
class FetchedWork:
    """Metadata for one DOI together with the journal candidate built from it."""

    doi: str
    candidate: JournalCandidate
    metadata: Mapping[str, object] = field(default_factory=dict)


@runtime_checkable
class WorkFetcher(Protocol):
    """Callable port for retrieving work metadata for a DOI.

    Raises ``WorkNotFoundError``, ``UpstreamFetchError`` or
    ``MetadataUnparsableError`` on failure.
    """

    def __call__(self, doi: str) -> FetchedWork: ...


__all__ = ["FetchedWork", "WorkFetcher"]
