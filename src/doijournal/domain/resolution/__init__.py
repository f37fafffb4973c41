"""Journal identity resolution and merge engine.

Flow for one DOI:
1) admit the lookup through the single-flight gate
2) build a journal candidate from fetched work metadata
3) score stored journals sharing any attribute with the candidate
4) create, fill gaps in, or reuse the best matching record
5) release the gate
"""

from __future__ import annotations

from .admission import AdmissionGate, AdmissionLease
from .doi import require_valid_doi, verify_doi
from .errors import (
    AdmissionConflictError,
    InvalidDoiError,
    JournalInvariantError,
    MetadataUnparsableError,
    ResolutionError,
    UpstreamFetchError,
    WorkNotFoundError,
)
from .matching import MatchScore, find_best_match, score_candidate
from .merge import (
    CreatedJournal,
    InsufficientInformation,
    MergeAction,
    MergeOutcome,
    UnchangedJournal,
    UpdatedJournal,
    merge_candidate,
)
from .service import JournalResolutionService, OutcomeStatus, ResolutionOutcome

__all__ = [
    "AdmissionConflictError",
    "AdmissionGate",
    "AdmissionLease",
    "CreatedJournal",
    "InsufficientInformation",
    "InvalidDoiError",
    "JournalInvariantError",
    "JournalResolutionService",
    "MatchScore",
    "MergeAction",
    "MergeOutcome",
    "MetadataUnparsableError",
    "OutcomeStatus",
    "ResolutionError",
    "ResolutionOutcome",
    "UnchangedJournal",
    "UpdatedJournal",
    "UpstreamFetchError",
    "WorkNotFoundError",
    "find_best_match",
    "merge_candidate",
    "require_valid_doi",
    "score_candidate",
    "verify_doi",
]
