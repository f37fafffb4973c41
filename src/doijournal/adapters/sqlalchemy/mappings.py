"""SQLAlchemy table metadata for journal records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Column, Enum, ForeignKey, Index, Integer, MetaData, String, Table

from doijournal.domain.model import IssnKind

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

journal_table = Table(
    "journal",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String, nullable=True),
    Index("ix_journal_title", "title"),
)

journal_identifier_table = Table(
    "journal_identifier",
    metadata,
    Column(
        "journal_id",
        String,
        ForeignKey("journal.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    # values_callable stores "Print"/"Online"/"" rather than the member names
    Column(
        "kind",
        Enum(
            IssnKind,
            native_enum=False,
            create_constraint=False,
            length=16,
            values_callable=lambda kinds: [kind.value for kind in kinds],
        ),
        nullable=False,
    ),
    Column("value", String, nullable=False),
    Index("ix_journal_identifier_kind_value", "kind", "value"),
)


def create_all_tables(engine: Engine) -> None:
    """Create database tables without going through migrations."""

    log.info("Creating all tables")
    metadata.create_all(engine)
