"""Identity matching of journal candidates against stored records.

Responsibilities of this stage:
- query the repository once for the candidate title and once per identifier
- score every returned record id by the number of queries that returned it
- select the best scoring id without mutating persistence state

A single matching attribute is enough to claim identity. Titles and ISSNs are
both close to unique among journals, so a false merge is preferred over creating
a duplicate record.

Ties are broken by first appearance: the title query runs first, identifier
queries follow in candidate order, and ids within one query are visited in
sorted order. Identical inputs therefore always select the same record.
"""

from __future__ import annotations

from collections import Counter
from logging import getLogger
from typing import TYPE_CHECKING, Final

from doijournal.domain.model import JournalAttribute

if TYPE_CHECKING:
    from collections.abc import Iterator

    from doijournal.domain.model import JournalCandidate, JournalId
    from doijournal.domain.ports.persistence import JournalRepository

log = getLogger(__name__)

MINIMUM_QUALIFYING_SCORE: Final[int] = 1

type MatchQuery = tuple[JournalAttribute, str]


class MatchScore(Counter["JournalId"]):
    """Record id -> number of independent attributes that matched it."""

    def record(self, journal_ids: set[JournalId]) -> None:
        for journal_id in sorted(journal_ids):
            self[journal_id] += 1

    def best(self) -> JournalId | None:
        """Return the highest scoring id, earliest seen on ties, or ``None`` if empty."""

        best_id: JournalId | None = None
        best_score = MINIMUM_QUALIFYING_SCORE - 1
        for journal_id, score in self.items():
            if score > best_score:
                best_id, best_score = journal_id, score
        return best_id


def match_queries(candidate: JournalCandidate) -> Iterator[MatchQuery]:
    if candidate.has_title and candidate.title is not None:
        yield JournalAttribute.NAME, candidate.title
    for identifier in candidate.identifiers:
        yield JournalAttribute.ISSNS, identifier.serialized


def score_candidate(candidate: JournalCandidate, repository: JournalRepository) -> MatchScore:
    scores = MatchScore()
    for attribute, value in match_queries(candidate):
        journal_ids = repository.find_by_attribute(attribute, value)
        if journal_ids:
            log.debug("%s=%r matched %d journal(s)", attribute, value, len(journal_ids))
        scores.record(journal_ids)
    return scores


def find_best_match(candidate: JournalCandidate, repository: JournalRepository) -> JournalId | None:
    """Return the id of the stored journal best matching ``candidate``, if any."""

    scores = score_candidate(candidate, repository)
    best = scores.best()
    if best is None:
        log.debug("No stored journal matches %r", candidate.title)
    else:
        log.debug("Best journal match %s with score %d of %d", best, scores[best], len(scores))
    return best
