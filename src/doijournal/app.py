"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from logging import getLogger
from typing import TYPE_CHECKING

from doijournal.adapters.crossref import CrossrefWorkFetcher
from doijournal.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyJournalUnitOfWork,
    is_started,
    startup,
)
from doijournal.config import get_crossref_config, get_resolver_config
from doijournal.domain.resolution import AdmissionGate, JournalResolutionService

if TYPE_CHECKING:
    from doijournal.config import ResolverConfig
    from doijournal.domain.ports.fetching import WorkFetcher
    from doijournal.domain.ports.unit_of_work import JournalUnitOfWork
    from doijournal.domain.resolution import ResolutionOutcome

UnitOfWorkFactory = Callable[[], "JournalUnitOfWork"]


log = getLogger(__name__)


def build_resolution_service(
    *,
    fetcher: WorkFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    resolver_config: ResolverConfig | None = None,
    gate: AdmissionGate | None = None,
) -> JournalResolutionService:
    """Wire the resolution service to Crossref and the SQLAlchemy repository.

    One service (and therefore one admission gate) should be shared by every
    caller in the process.
    """

    config = resolver_config or get_resolver_config()
    if unit_of_work_factory is None:
        if not is_started():
            startup(id_prefix=config.repository_base_url)
        unit_of_work_factory = SqlAlchemyJournalUnitOfWork

    return JournalResolutionService(
        fetcher=fetcher or CrossrefWorkFetcher(config=get_crossref_config()),
        unit_of_work_factory=unit_of_work_factory,
        gate=gate or AdmissionGate(config.lease_seconds),
        externalize_id=config.externalize_id,
    )


def resolve_dois(
    dois: Iterable[str],
    *,
    service: JournalResolutionService | None = None,
) -> list[ResolutionOutcome]:
    """Resolve each DOI in turn and return the outcomes in input order."""

    active_service = service or build_resolution_service()
    outcomes: list[ResolutionOutcome] = []
    for doi in dois:
        outcome = active_service.resolve(doi)
        log.info("Resolved %s: %s (%d)", doi, outcome.status, outcome.http_status)
        outcomes.append(outcome)
    return outcomes
