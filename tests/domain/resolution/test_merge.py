from __future__ import annotations

import pytest

from doijournal.domain.model import TypedIdentifier
from doijournal.domain.resolution import (
    CreatedJournal,
    InsufficientInformation,
    JournalInvariantError,
    MergeAction,
    MergeOutcome,
    UnchangedJournal,
    UpdatedJournal,
    find_best_match,
    merge_candidate,
)
from tests.helpers.journals import InMemoryJournalRepository, make_candidate, make_record


def _resolve(
    candidate_title: str | None, *identifiers: str, repository: InMemoryJournalRepository
) -> MergeOutcome:
    candidate = make_candidate(candidate_title, *identifiers)
    match = find_best_match(candidate, repository)
    return merge_candidate(candidate, match, repository)


def test_complete_candidate_without_match_creates_record() -> None:
    repository = InMemoryJournalRepository()

    outcome = _resolve("Journal", ":MOO", repository=repository)

    assert isinstance(outcome, CreatedJournal)
    assert outcome.action is MergeAction.CREATED
    assert outcome.record.id is not None
    assert outcome.record.title == "Journal"
    assert outcome.record.serialized_identifiers == [":MOO"]
    assert repository.creates == 1


@pytest.mark.parametrize(
    ("title", "identifiers"),
    [
        (None, (":MOO",)),
        ("", (":MOO",)),
        ("Journal", ()),
        (None, ()),
    ],
)
def test_incomplete_candidate_without_match_is_insufficient(
    title: str | None, identifiers: tuple[str, ...]
) -> None:
    repository = InMemoryJournalRepository()

    outcome = _resolve(title, *identifiers, repository=repository)

    assert isinstance(outcome, InsufficientInformation)
    assert outcome.record is None
    assert repository.writes == 0
    assert len(repository) == 0


def test_identical_candidate_leaves_record_untouched() -> None:
    stored = make_record("j1", "Fancy Journal", "Print:0000-0001", "Online:0000-0002")
    repository = InMemoryJournalRepository([stored])

    outcome = _resolve(
        "Fancy Journal", "Print:0000-0001", "Online:0000-0002", repository=repository
    )

    assert isinstance(outcome, UnchangedJournal)
    assert outcome.record.id == "j1"
    assert repository.writes == 0


def test_subset_candidate_with_other_title_matches_on_shared_identifier() -> None:
    stored = make_record("j1", "Fancy Journal", "Print:0000-0001", "Online:0000-0002")
    repository = InMemoryJournalRepository([stored])

    outcome = _resolve(
        "Advanced Research in Animal Husbandry", "Online:0000-0002", repository=repository
    )

    assert isinstance(outcome, UnchangedJournal)
    assert outcome.record.id == "j1"
    assert repository.get("j1").title == "Fancy Journal"
    assert repository.get("j1").serialized_identifiers == ["Print:0000-0001", "Online:0000-0002"]
    assert repository.writes == 0


def test_new_identifiers_are_appended_after_existing_ones() -> None:
    repository = InMemoryJournalRepository([make_record("j1", "Journal", "Print:0000-0001")])

    outcome = _resolve("Journal", "Online:0000-0002", "Print:0000-0001", repository=repository)

    assert isinstance(outcome, UpdatedJournal)
    assert outcome.added_identifiers == 1
    assert not outcome.title_filled
    assert repository.get("j1").serialized_identifiers == ["Print:0000-0001", "Online:0000-0002"]
    assert repository.updates == 1


def test_existing_title_is_never_overwritten() -> None:
    repository = InMemoryJournalRepository([make_record("j1", "Stored Title", "Print:0000-0001")])

    outcome = _resolve("Crossref Title", "Print:0000-0001", repository=repository)

    assert isinstance(outcome, UnchangedJournal)
    assert repository.get("j1").title == "Stored Title"
    assert repository.writes == 0


@pytest.mark.parametrize("stored_title", [None, ""])
def test_missing_title_is_filled_from_candidate(stored_title: str | None) -> None:
    repository = InMemoryJournalRepository([make_record("j1", stored_title, "Online:0000-0002")])

    outcome = _resolve("Journal", "Online:0000-0002", repository=repository)

    assert isinstance(outcome, UpdatedJournal)
    assert outcome.title_filled
    assert outcome.added_identifiers == 0
    assert repository.get("j1").title == "Journal"
    assert repository.updates == 1


def test_title_only_candidate_reuses_matched_record() -> None:
    repository = InMemoryJournalRepository([make_record("j1", "Journal", "Print:0000-0001")])

    outcome = _resolve("Journal", repository=repository)

    assert isinstance(outcome, UnchangedJournal)
    assert outcome.record.id == "j1"


def test_identifier_only_candidate_can_extend_matched_record() -> None:
    repository = InMemoryJournalRepository([make_record("j1", "Journal", ":MOO")])

    outcome = _resolve(None, ":MOO", "Print:0000-0001", repository=repository)

    assert isinstance(outcome, UpdatedJournal)
    assert repository.get("j1").title == "Journal"
    assert repository.get("j1").serialized_identifiers == [":MOO", "Print:0000-0001"]


def test_merge_returns_record_with_all_identifiers() -> None:
    repository = InMemoryJournalRepository([make_record("j1", "Journal", "Print:0000-0001")])
    candidate = make_candidate("Journal", "Online:0000-0002")

    outcome = merge_candidate(candidate, "j1", repository)

    assert outcome.record is not None
    assert outcome.record.identifiers == [
        TypedIdentifier.print_issn("0000-0001"),
        TypedIdentifier.electronic_issn("0000-0002"),
    ]


def test_unreadable_match_is_an_invariant_violation() -> None:
    repository = InMemoryJournalRepository([make_record("j1", "Journal", "Print:0000-0001")])
    repository.hidden.add("j1")

    with pytest.raises(JournalInvariantError, match="j1"):
        merge_candidate(make_candidate("Journal", "Print:0000-0001"), "j1", repository)

    assert repository.writes == 0


def test_resolving_same_candidate_twice_creates_one_record() -> None:
    repository = InMemoryJournalRepository()

    first = _resolve("Journal", "Print:0000-0001", repository=repository)
    second = _resolve("Journal", "Print:0000-0001", repository=repository)

    assert isinstance(first, CreatedJournal)
    assert isinstance(second, UnchangedJournal)
    assert first.record.id == second.record.id
    assert len(repository) == 1
