"""Shared fixtures for Crossref adapter tests."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

import httpx
import pytest

from doijournal.adapters.http_resilience import ResilientClient
from doijournal.config.crossref import CrossrefConfig
from doijournal.config.http_resilience import ResilienceConfig

if TYPE_CHECKING:
    from collections.abc import Callable

CrossrefPayload = dict[str, object]


@pytest.fixture
def crossref_config() -> CrossrefConfig:
    return CrossrefConfig(
        mailto="ops@example.org",
        resilience=ResilienceConfig(
            name="crossref",
            base_url="https://api.crossref.test/v1/",
            cache=None,
            default_headers={"User-Agent": "doijournal (mailto:ops@example.org)"},
        ),
    )


@pytest.fixture
def work_payload(crossref_work_payload: CrossrefPayload) -> CrossrefPayload:
    return copy.deepcopy(crossref_work_payload)


@pytest.fixture
def make_client_factory() -> Callable[
    [Callable[[httpx.Request], httpx.Response]], Callable[[ResilienceConfig], ResilientClient]
]:
    def build(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> Callable[[ResilienceConfig], ResilientClient]:
        async def async_handler(request: httpx.Request) -> httpx.Response:
            return handler(request)

        def factory(resilience: ResilienceConfig) -> ResilientClient:
            client = ResilientClient(resilience)
            client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
                base_url=resilience.base_url or "",
                headers=dict(resilience.default_headers or {}),
                transport=httpx.MockTransport(async_handler),
            )
            return client

        return factory

    return build
