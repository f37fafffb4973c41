from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from doijournal.adapters.sqlalchemy.migrations import upgrade_head
from doijournal.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyJournalUnitOfWork,
    shutdown,
    startup,
)

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def crossref_work_payload() -> dict[str, object]:
    path = DATA_DIR / "crossref" / "work_cmc_s38446.json"
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    # one shared connection so every session sees the same in-memory database
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    upgrade_head(engine=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemyJournalUnitOfWork]]:
    startup(engine=sqlite_engine, id_prefix="http://fcrepo:8080/fcrepo/rest/", force=True)

    def factory() -> SqlAlchemyJournalUnitOfWork:
        return SqlAlchemyJournalUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()
