"""Journal resolution defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, positive_float_env_var

# longest time we expect one resolution to take
DEFAULT_LEASE_SECONDS = 30.0
DEFAULT_REPOSITORY_BASE_URL = "http://fcrepo:8080/fcrepo/rest/"
DEFAULT_REPOSITORY_EXTERNAL_BASE_URL = "https://pass.local/fcrepo/rest/"


def _with_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    lease_seconds: float = DEFAULT_LEASE_SECONDS
    repository_base_url: str = DEFAULT_REPOSITORY_BASE_URL
    repository_external_base_url: str = DEFAULT_REPOSITORY_EXTERNAL_BASE_URL

    def externalize_id(self, journal_id: str) -> str:
        """Rewrite an internal repository id into its publicly reachable form."""

        internal = _with_trailing_slash(self.repository_base_url)
        external = _with_trailing_slash(self.repository_external_base_url)
        if journal_id.startswith(internal):
            return external + journal_id.removeprefix(internal)
        return journal_id


def get_resolver_config() -> ResolverConfig:
    return ResolverConfig(
        lease_seconds=positive_float_env_var("DOI_LEASE_SECONDS", DEFAULT_LEASE_SECONDS),
        repository_base_url=optional_env_var(
            "JOURNAL_REPOSITORY_BASE_URL", DEFAULT_REPOSITORY_BASE_URL
        ),
        repository_external_base_url=optional_env_var(
            "JOURNAL_REPOSITORY_EXTERNAL_BASE_URL", DEFAULT_REPOSITORY_EXTERNAL_BASE_URL
        ),
    )
