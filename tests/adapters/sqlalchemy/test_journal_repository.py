from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import select

from doijournal.adapters.sqlalchemy import SqlAlchemyJournalRepository, journal_identifier_table
from doijournal.domain.model import JournalAttribute, JournalRecord, TypedIdentifier
from doijournal.domain.ports.persistence import JournalNotFoundError, JournalRepository

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

PREFIX = "http://fcrepo:8080/fcrepo/rest/"


@pytest.fixture
def repository(sqlite_session: Session) -> SqlAlchemyJournalRepository:
    return SqlAlchemyJournalRepository(sqlite_session, id_prefix=PREFIX)


def _record(title: str | None, *identifiers: TypedIdentifier) -> JournalRecord:
    return JournalRecord(title=title, identifiers=list(identifiers))


def test_repository_satisfies_port(repository: SqlAlchemyJournalRepository) -> None:
    assert isinstance(repository, JournalRepository)


def test_create_assigns_prefixed_id(repository: SqlAlchemyJournalRepository) -> None:
    created = repository.create(_record("Journal", TypedIdentifier.print_issn("0000-0001")))

    assert created.id is not None
    assert created.id.startswith(f"{PREFIX}journals/")


def test_read_round_trips_title_and_identifier_order(
    repository: SqlAlchemyJournalRepository,
) -> None:
    identifiers = (
        TypedIdentifier.electronic_issn("0000-0002"),
        TypedIdentifier.unspecified("MOO"),
        TypedIdentifier.print_issn("0000-0001"),
    )
    created = repository.create(_record("Journal", *identifiers))
    assert created.id is not None

    stored = repository.read(created.id)

    assert stored is not None
    assert stored.title == "Journal"
    assert stored.identifiers == list(identifiers)


def test_read_unknown_id_returns_none(repository: SqlAlchemyJournalRepository) -> None:
    assert repository.read(f"{PREFIX}journals/missing") is None


def test_find_by_name_and_by_serialized_identifier(
    repository: SqlAlchemyJournalRepository,
) -> None:
    first = repository.create(_record("Journal", TypedIdentifier.print_issn("0000-0001")))
    second = repository.create(_record("Other", TypedIdentifier.electronic_issn("0000-0001")))

    assert repository.find_by_attribute(JournalAttribute.NAME, "Journal") == {first.id}
    assert repository.find_by_attribute(JournalAttribute.ISSNS, "Print:0000-0001") == {first.id}
    assert repository.find_by_attribute(JournalAttribute.ISSNS, "Online:0000-0001") == {second.id}
    assert repository.find_by_attribute(JournalAttribute.ISSNS, ":0000-0001") == set()
    assert repository.find_by_attribute(JournalAttribute.NAME, "Nobody") == set()


def test_unspecified_identifier_is_stored_with_empty_kind(
    repository: SqlAlchemyJournalRepository, sqlite_session: Session
) -> None:
    created = repository.create(_record("Journal", TypedIdentifier.unspecified("MOO")))

    kinds = sqlite_session.execute(
        select(journal_identifier_table.c.kind).where(
            journal_identifier_table.c.journal_id == created.id
        )
    ).scalars()

    assert repository.find_by_attribute(JournalAttribute.ISSNS, ":MOO") == {created.id}
    assert [str(kind) for kind in kinds] == [""]


def test_find_by_unparsable_identifier_returns_empty(
    repository: SqlAlchemyJournalRepository,
) -> None:
    assert repository.find_by_attribute(JournalAttribute.ISSNS, "Digital:0000-0001") == set()


def test_update_replaces_title_and_identifiers(repository: SqlAlchemyJournalRepository) -> None:
    created = repository.create(_record(None, TypedIdentifier.print_issn("0000-0001")))
    created.title = "Journal"
    created.identifiers.append(TypedIdentifier.electronic_issn("0000-0002"))

    repository.update(created)

    assert created.id is not None
    stored = repository.read(created.id)
    assert stored is not None
    assert stored.title == "Journal"
    assert stored.serialized_identifiers == ["Print:0000-0001", "Online:0000-0002"]


def test_update_missing_record_raises(repository: SqlAlchemyJournalRepository) -> None:
    ghost = JournalRecord(id=f"{PREFIX}journals/ghost", title="Ghost")

    with pytest.raises(JournalNotFoundError):
        repository.update(ghost)
