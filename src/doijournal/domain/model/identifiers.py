"""Typed journal identifiers.

An identifier is serialized as ``"<kind>:<value>"``; unspecified identifiers keep
the separator with an empty kind (``":1234-5678"``). Two identifiers are equal
exactly when their serialized forms are equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from doijournal.domain.model.enums import IssnKind

if TYPE_CHECKING:
    from collections.abc import Iterable

SEPARATOR: Final[str] = ":"


@dataclass(frozen=True, slots=True)
class TypedIdentifier:
    kind: IssnKind
    value: str

    def __str__(self) -> str:
        return self.serialized

    @property
    def serialized(self) -> str:
        return f"{self.kind.value}{SEPARATOR}{self.value}"

    @classmethod
    def parse(cls, text: str) -> TypedIdentifier:
        """Parse ``"<kind>:<value>"``; text without a separator is an unspecified value."""

        prefix, separator, value = text.partition(SEPARATOR)
        if not separator:
            return cls(IssnKind.UNSPECIFIED, text)
        try:
            kind = IssnKind(prefix)
        except ValueError as exc:
            raise ValueError(f"Unknown identifier kind {prefix!r} in {text!r}") from exc
        return cls(kind, value)

    @classmethod
    def print_issn(cls, value: str) -> TypedIdentifier:
        return cls(IssnKind.PRINT, value)

    @classmethod
    def electronic_issn(cls, value: str) -> TypedIdentifier:
        return cls(IssnKind.ELECTRONIC, value)

    @classmethod
    def unspecified(cls, value: str) -> TypedIdentifier:
        return cls(IssnKind.UNSPECIFIED, value)


def unique_identifiers(identifiers: Iterable[TypedIdentifier]) -> tuple[TypedIdentifier, ...]:
    """Collapse duplicates, keeping first-seen order."""

    return tuple(dict.fromkeys(identifiers))
