"""Crossref work lookup adapter."""

from __future__ import annotations

from .client import CrossrefClient
from .fetcher import CrossrefWorkFetcher
from .translator import translate_work

__all__ = ["CrossrefClient", "CrossrefWorkFetcher", "translate_work"]
