"""Failures surfaced while resolving a DOI to a journal record.

Insufficient information is deliberately absent: it is a normal outcome of the
merge step and is reported through its return value.
"""

from __future__ import annotations


class ResolutionError(RuntimeError):
    """Base class for resolution failures."""


class InvalidDoiError(ResolutionError, ValueError):
    """Raised when the supplied DOI is not in Crossref format."""


class AdmissionConflictError(ResolutionError):
    """Raised when a resolution for the same key is already in progress."""

    def __init__(self, key: str) -> None:
        super().__init__(f"There is already an active request for {key}; try again later.")
        self.key = key


class UpstreamFetchError(ResolutionError):
    """Raised when metadata could not be retrieved from the upstream registry."""


class WorkNotFoundError(ResolutionError):
    """Raised when the upstream registry has no work for the DOI."""


class MetadataUnparsableError(ResolutionError):
    """Raised when upstream metadata cannot be decoded into a journal candidate."""


class JournalInvariantError(ResolutionError):
    """Raised when a matched journal id cannot be read back from the repository.

    This signals an environment or programming fault and must never be retried
    or swallowed.
    """
