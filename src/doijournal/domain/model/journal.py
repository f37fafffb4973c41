"""Journal candidates and persisted journal records."""

from __future__ import annotations

from dataclasses import dataclass, field

from doijournal.domain.model.identifiers import TypedIdentifier, unique_identifiers

type JournalId = str


def _has_text(value: str | None) -> bool:
    return value is not None and value != ""


@dataclass(slots=True, kw_only=True)
class JournalCandidate:
    """Normalized journal description derived from freshly fetched metadata.

    Candidates are never persisted directly; the merge step either copies them
    into a new record or folds them into an existing one.
    """

    title: str | None = None
    identifiers: tuple[TypedIdentifier, ...] = ()

    def __post_init__(self) -> None:
        self.identifiers = unique_identifiers(self.identifiers)

    @property
    def has_title(self) -> bool:
        return _has_text(self.title)

    @property
    def is_complete(self) -> bool:
        """Whether there is enough information to create a new record."""
        return self.has_title and bool(self.identifiers)


@dataclass(eq=False, kw_only=True)
class JournalRecord:
    """The repository's persisted journal entity.

    ``id`` is assigned by the repository on creation and never changes afterwards;
    rebinding an assigned id raises ``AttributeError``.
    """

    id: JournalId | None = None
    title: str | None = None
    identifiers: list[TypedIdentifier] = field(default_factory=list["TypedIdentifier"])

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id":
            current = getattr(self, "id", None)
            if current is not None and value != current:
                msg = f"Journal id {current!r} is already assigned"
                raise AttributeError(msg)
        super().__setattr__(name, value)

    @classmethod
    def from_candidate(cls, candidate: JournalCandidate) -> JournalRecord:
        return cls(title=candidate.title, identifiers=list(candidate.identifiers))

    @property
    def has_title(self) -> bool:
        return _has_text(self.title)

    @property
    def serialized_identifiers(self) -> list[str]:
        return [identifier.serialized for identifier in self.identifiers]
