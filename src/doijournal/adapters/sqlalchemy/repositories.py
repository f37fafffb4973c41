"""Journal repository backed by SQLAlchemy sessions."""

from __future__ import annotations

import uuid
from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from doijournal.adapters.sqlalchemy.mappings import journal_identifier_table, journal_table
from doijournal.domain.model import JournalAttribute, JournalRecord, TypedIdentifier
from doijournal.domain.ports.persistence import JournalNotFoundError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from doijournal.domain.model import JournalId

log = getLogger(__name__)


class SqlAlchemyJournalRepository:
    """Stores journals as one ``journal`` row plus ordered ``journal_identifier`` rows."""

    def __init__(self, session: Session, *, id_prefix: str = "") -> None:
        self.session = session
        self._id_prefix = id_prefix if not id_prefix or id_prefix.endswith("/") else f"{id_prefix}/"

    def find_by_attribute(self, attribute: JournalAttribute, value: str) -> set[JournalId]:
        if attribute is JournalAttribute.NAME:
            stmt = select(journal_table.c.id).where(journal_table.c.title == value)
        else:
            try:
                identifier = TypedIdentifier.parse(value)
            except ValueError:
                log.debug("Ignoring unparsable identifier query %r", value)
                return set()
            stmt = (
                select(journal_identifier_table.c.journal_id)
                .where(journal_identifier_table.c.kind == identifier.kind)
                .where(journal_identifier_table.c.value == identifier.value)
            )
        return set(self.session.execute(stmt).scalars())

    def read(self, journal_id: JournalId) -> JournalRecord | None:
        row = self.session.execute(
            select(journal_table.c.id, journal_table.c.title).where(
                journal_table.c.id == journal_id
            )
        ).one_or_none()
        if row is None:
            return None
        identifiers = [
            TypedIdentifier(kind, value)
            for kind, value in self.session.execute(
                select(journal_identifier_table.c.kind, journal_identifier_table.c.value)
                .where(journal_identifier_table.c.journal_id == journal_id)
                .order_by(journal_identifier_table.c.position)
            )
        ]
        return JournalRecord(id=row.id, title=row.title, identifiers=identifiers)

    def create(self, record: JournalRecord) -> JournalRecord:
        journal_id = f"{self._id_prefix}journals/{uuid.uuid4()}"
        self.session.execute(insert(journal_table).values(id=journal_id, title=record.title))
        self._write_identifiers(journal_id, record.identifiers)
        self.session.flush()
        return JournalRecord(
            id=journal_id, title=record.title, identifiers=list(record.identifiers)
        )

    def update(self, record: JournalRecord) -> None:
        if record.id is None:
            raise JournalNotFoundError("Cannot update a journal record without an id")
        result = self.session.execute(
            update(journal_table).where(journal_table.c.id == record.id).values(title=record.title)
        )
        if result.rowcount == 0:
            raise JournalNotFoundError(f"Journal {record.id} does not exist")
        self.session.execute(
            delete(journal_identifier_table).where(
                journal_identifier_table.c.journal_id == record.id
            )
        )
        self._write_identifiers(record.id, record.identifiers)
        self.session.flush()

    def _write_identifiers(self, journal_id: JournalId, identifiers: list[TypedIdentifier]) -> None:
        if not identifiers:
            return
        self.session.execute(
            insert(journal_identifier_table),
            [
                {
                    "journal_id": journal_id,
                    "position": position,
                    "kind": identifier.kind,
                    "value": identifier.value,
                }
                for position, identifier in enumerate(identifiers)
            ],
        )
