"""Translate Crossref work records into journal candidates."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from doijournal.domain.model import IssnKind, JournalCandidate, TypedIdentifier

if TYPE_CHECKING:
    from .schema import CrossrefWork

log = getLogger(__name__)

_ISSN_KIND_MAP: dict[str, IssnKind] = {
    "print": IssnKind.PRINT,
    "electronic": IssnKind.ELECTRONIC,
}


def translate_work(work: CrossrefWork) -> JournalCandidate:
    """Build a journal candidate from the ``message`` part of a work response.

    Typed ISSNs come first, in payload order. An untyped ISSN is only added when
    no typed entry carried the same raw value. Null and empty values are skipped.
    """

    title = work.container_title[0] if work.container_title else None

    identifiers: list[TypedIdentifier] = []
    typed_values: set[str] = set()
    for entry in work.issn_type or ():
        if not entry.value:
            continue
        typed_values.add(entry.value)
        kind = _ISSN_KIND_MAP.get(entry.type or "", IssnKind.UNSPECIFIED)
        identifier = TypedIdentifier(kind, entry.value)
        log.debug("Adding typed ISSN %s", identifier)
        identifiers.append(identifier)

    for value in work.issn or ():
        if not value or value in typed_values:
            continue
        identifiers.append(TypedIdentifier.unspecified(value))

    return JournalCandidate(title=title, identifiers=tuple(identifiers))
