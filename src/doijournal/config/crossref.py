"""Crossref configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_CROSSREF_BASE_URL = "https://api.crossref.org/v1/"
CROSSREF_TIMEOUT_SECONDS = 30.0
# one hour; work metadata rarely changes between lookups
CROSSREF_CACHE_TTL_SECONDS = 3600.0


def _is_ok_envelope(payload: object) -> bool:
    return isinstance(payload, dict) and payload.get("status") == "ok"


@dataclass(frozen=True, slots=True)
class CrossrefConfig:
    """Holds Crossref works API configuration values."""

    mailto: str
    resilience: ResilienceConfig


def get_crossref_config(*, resilience: ResilienceConfig | None = None) -> CrossrefConfig:
    values = require_env_vars(("CROSSREF_MAILTO",))
    mailto = values["CROSSREF_MAILTO"].strip()
    base_url = optional_env_var("CROSSREF_BASE_URL", DEFAULT_CROSSREF_BASE_URL)
    if not base_url.endswith("/"):
        base_url += "/"

    return CrossrefConfig(
        mailto=mailto,
        resilience=resilience
        or ResilienceConfig(
            name="crossref",
            base_url=base_url,
            timeout_seconds=CROSSREF_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            retry=RetryPolicy(total=3),
            cache=CacheConfig(
                backend="sqlite",
                default_ttl_seconds=CROSSREF_CACHE_TTL_SECONDS,
                should_cache=_is_ok_envelope,
            ),
            default_headers={"User-Agent": f"doijournal (mailto:{mailto})"},
        ),
    )
