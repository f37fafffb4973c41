"""DOI syntax checks."""

from __future__ import annotations

import re
from typing import Final

from .errors import InvalidDoiError

DOI_PATTERN: Final[re.Pattern[str]] = re.compile(r"^10\.\d{4,9}/[-._;()/:a-zA-Z0-9]+$")
_RESOLVER_HOST: Final[str] = "doi.org/"


def verify_doi(doi: str | None) -> str | None:
    """Return the bare DOI if valid, else ``None``.

    A resolver URL prefix such as ``https://dx.doi.org/`` is stripped first.
    """

    if doi is None:
        return None
    _, host, suffix = doi.partition(_RESOLVER_HOST)
    candidate = suffix if host else doi
    return candidate if DOI_PATTERN.fullmatch(candidate) else None


def require_valid_doi(doi: str | None) -> str:
    verified = verify_doi(doi)
    if verified is None:
        raise InvalidDoiError("Supplied DOI is not in valid Crossref format.")
    return verified
