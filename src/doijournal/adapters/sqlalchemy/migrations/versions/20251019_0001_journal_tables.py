"""Create journal tables.

Revision ID: 0001_journal_tables
Revises:
Create Date: 2025-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_journal_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "journal",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_journal")),
    )
    op.create_index("ix_journal_title", "journal", ["title"])
    op.create_table(
        "journal_identifier",
        sa.Column("journal_id", sa.String(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("kind", sa.String(length=16), nullable=False),
        sa.Column("value", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(
            ["journal_id"],
            ["journal.id"],
            name=op.f("fk_journal_identifier_journal_id_journal"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("journal_id", "position", name=op.f("pk_journal_identifier")),
    )
    op.create_index(
        "ix_journal_identifier_kind_value", "journal_identifier", ["kind", "value"]
    )


def downgrade() -> None:
    op.drop_index("ix_journal_identifier_kind_value", table_name="journal_identifier")
    op.drop_table("journal_identifier")
    op.drop_index("ix_journal_title", table_name="journal")
    op.drop_table("journal")
