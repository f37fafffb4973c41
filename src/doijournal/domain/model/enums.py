"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class IssnKind(StrEnum):
    """Kind of an ISSN, valued by the prefix used in the serialized form."""

    PRINT = "Print"
    ELECTRONIC = "Online"
    UNSPECIFIED = ""


class JournalAttribute(StrEnum):
    """Journal attributes the repository can be queried by."""

    NAME = "name"
    ISSNS = "issns"
