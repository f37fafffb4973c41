"""Crossref implementation of the work fetching port."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from doijournal.domain.ports.fetching import FetchedWork

from .client import CrossrefClient
from .translator import translate_work

if TYPE_CHECKING:
    from doijournal.config.crossref import CrossrefConfig

    from .schema import CrossrefWorkResponse

log = getLogger(__name__)


class WorkLookupClient(Protocol):
    def fetch_work(self, doi: str) -> tuple[CrossrefWorkResponse, dict[str, object]]: ...


class CrossrefWorkFetcher:
    """Fetch a work from Crossref and derive its journal candidate."""

    def __init__(self, *, config: CrossrefConfig, client: WorkLookupClient | None = None) -> None:
        self._client = client or CrossrefClient(config=config)

    def __call__(self, doi: str) -> FetchedWork:
        response, document = self._client.fetch_work(doi)
        candidate = translate_work(response.message)
        log.debug(
            "Crossref candidate for %s: title=%r identifiers=%s",
            doi,
            candidate.title,
            [str(identifier) for identifier in candidate.identifiers],
        )
        return FetchedWork(doi=doi, candidate=candidate, metadata=document)
