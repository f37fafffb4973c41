"""Application configuration helpers."""

from __future__ import annotations

from .crossref import CrossrefConfig, get_crossref_config
from .env import optional_env_var, positive_float_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .resolver import ResolverConfig, get_resolver_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "CrossrefConfig",
    "DatabaseConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "ResolverConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_crossref_config",
    "get_database_config",
    "get_resolver_config",
    "get_storage_config",
    "optional_env_var",
    "positive_float_env_var",
    "require_env_vars",
]
