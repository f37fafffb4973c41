"""Crossref works API client."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from doijournal.adapters.http_resilience import ResilientClient
from doijournal.domain.resolution.errors import (
    MetadataUnparsableError,
    UpstreamFetchError,
    WorkNotFoundError,
)

from .schema import CrossrefWorkResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from doijournal.config.crossref import CrossrefConfig
    from doijournal.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class CrossrefClient:
    """Low-level HTTP client for the Crossref works API."""

    def __init__(
        self,
        *,
        config: CrossrefConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def fetch_work(self, doi: str) -> tuple[CrossrefWorkResponse, dict[str, object]]:
        """Return the decoded work response together with the raw JSON document."""
        return asyncio.run(self._fetch_work_async(doi))

    async def _fetch_work_async(self, doi: str) -> tuple[CrossrefWorkResponse, dict[str, object]]:
        if self._resilience.base_url is None:
            raise UpstreamFetchError("Missing Crossref base_url in resilience configuration")

        path = f"works/{quote(doi, safe='/:;()')}"
        async with self._client_factory(self._resilience) as client:
            try:
                response = await client.get(path)
            except httpx.HTTPError as exc:
                raise UpstreamFetchError(f"Could not reach Crossref for {doi}: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            log.debug("Crossref answered 404 for %s: %s", doi, response.text.strip())
            raise WorkNotFoundError(doi)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamFetchError(
                f"Crossref returned HTTP {response.status_code} for {doi}"
            ) from exc

        return _decode(response)


def _decode(response: httpx.Response) -> tuple[CrossrefWorkResponse, dict[str, object]]:
    try:
        payload = response.json()
    except ValueError as exc:
        raise MetadataUnparsableError("Crossref response is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise MetadataUnparsableError("Unexpected Crossref response payload")
    try:
        decoded = CrossrefWorkResponse.model_validate(payload)
    except ValidationError as exc:
        raise MetadataUnparsableError(f"Crossref work record could not be decoded: {exc}") from exc
    return decoded, payload
