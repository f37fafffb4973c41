from __future__ import annotations

import asyncio

import httpx
import pytest

from doijournal.adapters.http_resilience import (
    ResilientClient,
    _build_cache_components,  # pyright: ignore[reportPrivateUsage]
    _ShouldCacheResponseFilter,  # pyright: ignore[reportPrivateUsage]
    build_retry,
)
from doijournal.config.http_resilience import (
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
)


def test_build_retry_copies_policy() -> None:
    retry = build_retry(RetryPolicy(total=5, status_forcelist=frozenset({503})))

    assert retry.total == 5
    assert 503 in retry.status_forcelist


def test_cache_disabled_yields_no_storage() -> None:
    assert _build_cache_components(None) == (None, None)
    assert _build_cache_components(CacheConfig(enabled=False)) == (None, None)


def test_unknown_cache_backend_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported cache backend"):
        _build_cache_components(CacheConfig(backend="redis"))  # type: ignore[arg-type]


def test_memory_cache_with_predicate_builds_filter_policy() -> None:
    storage, policy = _build_cache_components(
        CacheConfig(backend="memory", should_cache=lambda payload: bool(payload))
    )

    assert storage is not None
    assert policy is not None


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (b'{"status": "ok"}', True),
        (b'{"status": "failed"}', False),
        (b"not json", False),
        (None, True),
    ],
)
def test_should_cache_filter_applies_predicate(body: bytes | None, expected: bool) -> None:
    response_filter = _ShouldCacheResponseFilter(
        lambda payload: isinstance(payload, dict) and payload.get("status") == "ok"
    )

    assert response_filter.needs_body()
    assert response_filter.apply(None, body) is expected  # type: ignore[arg-type]


def test_rate_limited_client_sends_requests() -> None:
    seen: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json={"status": "ok"})

    async def run() -> list[int]:
        config = ResilienceConfig(
            name="test",
            base_url="https://api.test/",
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            cache=None,
        )
        async with ResilientClient(config) as client:
            client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
                base_url="https://api.test/", transport=httpx.MockTransport(handler)
            )
            responses = [await client.get(f"works/{index}") for index in range(3)]
        return [response.status_code for response in responses]

    assert asyncio.run(run()) == [200, 200, 200]
    assert seen == ["/works/0", "/works/1", "/works/2"]
