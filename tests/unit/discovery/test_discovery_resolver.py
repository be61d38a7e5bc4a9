#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import asyncio
import logging
from dataclasses import dataclass
from typing import Any
from unittest.mock import AsyncMock

import pytest

from smithy_aws_clients import URI
from smithy_aws_clients.discovery import (
    DISCOVERED_ADDRESS,
    SHARED_CACHE_KEY,
    EndpointCache,
    EndpointDiscoveryResolver,
)
from smithy_aws_clients.discovery.resolver import address_to_uri
from smithy_aws_clients.endpoints import (
    EndpointResolverParams,
    StandardRegionalEndpointsResolver,
)
from smithy_aws_clients.exceptions import (
    EndpointResolutionError,
    ServiceError,
    SmithyError,
)
from smithy_aws_clients.operations import DiscoveryMode, OperationSpec
from smithy_aws_clients.services.dynamodb.models import (
    Endpoint as DiscoveredEndpoint,
)
from smithy_aws_clients.types import TypedProperties

REGIONAL_HOST = "dynamodb.us-west-2.amazonaws.com"


@dataclass
class DiscoveryConfig:
    endpoint_discovery_enabled: bool = True
    endpoint_uri: str | URI | None = None
    region: str | None = "us-west-2"
    scheme: str = "https"


@dataclass(kw_only=True)
class Input:
    table_name: str | None = None


@dataclass(kw_only=True)
class Output:
    pass


DISCOVERED = OperationSpec(
    name="GetItem", input=Input, output=Output, discovery=DiscoveryMode.OPTIONAL
)
NOT_DISCOVERED = OperationSpec(name="ExecuteStatement", input=Input, output=Output)


def params(
    config: DiscoveryConfig | None = None, operation: OperationSpec[Any, Any] = DISCOVERED
) -> EndpointResolverParams[Any]:
    return EndpointResolverParams(
        operation=operation,
        input=Input(table_name="Music"),
        context=TypedProperties({"config": config or DiscoveryConfig()}),
    )


def endpoints(*addresses: str, period: int = 1440) -> list[DiscoveredEndpoint]:
    return [
        DiscoveredEndpoint(address=address, cache_period_in_minutes=period)
        for address in addresses
    ]


def resolver(
    discover: AsyncMock, cache: EndpointCache | None = None
) -> EndpointDiscoveryResolver:
    return EndpointDiscoveryResolver(
        static_resolver=StandardRegionalEndpointsResolver("dynamodb"),
        cache=cache if cache is not None else EndpointCache(),
        discover=discover,
    )


async def test_miss_discovers_and_caches_endpoint() -> None:
    discover = AsyncMock(return_value=endpoints("discovered.example.com"))
    cache = EndpointCache()

    endpoint = await resolver(discover, cache).resolve_endpoint(params())

    assert endpoint.uri.host == "discovered.example.com"
    assert endpoint.uri.scheme == "https"
    assert cache.get(SHARED_CACHE_KEY) == "discovered.example.com"
    discover.assert_awaited_once()


async def test_cache_hit_skips_discovery() -> None:
    discover = AsyncMock()
    cache = EndpointCache()
    cache.put(SHARED_CACHE_KEY, "cached.example.com", 10)

    endpoint = await resolver(discover, cache).resolve_endpoint(params())

    assert endpoint.uri.host == "cached.example.com"
    discover.assert_not_awaited()


async def test_repeated_calls_discover_once() -> None:
    discover = AsyncMock(return_value=endpoints("discovered.example.com"))
    subject = resolver(discover)

    for _ in range(3):
        endpoint = await subject.resolve_endpoint(params())
        assert endpoint.uri.host == "discovered.example.com"

    discover.assert_awaited_once()


async def test_expired_entry_triggers_rediscovery() -> None:
    discover = AsyncMock(return_value=endpoints("fresh.example.com"))
    cache = EndpointCache()
    cache.put(SHARED_CACHE_KEY, "stale.example.com", 0)

    endpoint = await resolver(discover, cache).resolve_endpoint(params())

    assert endpoint.uri.host == "fresh.example.com"
    discover.assert_awaited_once()


async def test_discovery_error_falls_back_to_regional_endpoint(
    caplog: pytest.LogCaptureFixture,
) -> None:
    discover = AsyncMock(
        side_effect=ServiceError("Access denied", code="AccessDeniedException")
    )
    cache = EndpointCache()

    with caplog.at_level(logging.ERROR):
        endpoint = await resolver(discover, cache).resolve_endpoint(params())

    assert endpoint.uri.host == REGIONAL_HOST
    assert len(cache) == 0
    assert "Failed to discover endpoints" in caplog.text
    assert "falling back to the regional endpoint" in caplog.text


async def test_empty_discovery_result_falls_back_to_regional_endpoint(
    caplog: pytest.LogCaptureFixture,
) -> None:
    discover = AsyncMock(return_value=[])
    cache = EndpointCache()

    with caplog.at_level(logging.ERROR):
        endpoint = await resolver(discover, cache).resolve_endpoint(params())

    assert endpoint.uri.host == REGIONAL_HOST
    assert len(cache) == 0
    assert caplog.records[-1].levelno == logging.ERROR


async def test_invalid_discovered_address_falls_back_to_regional_endpoint() -> None:
    discover = AsyncMock(return_value=endpoints("bad host/with/path"))
    cache = EndpointCache()

    endpoint = await resolver(discover, cache).resolve_endpoint(params())

    assert endpoint.uri.host == REGIONAL_HOST
    assert len(cache) == 0


async def test_failed_discovery_is_not_cached() -> None:
    discover = AsyncMock(
        side_effect=[SmithyError("connection reset"), endpoints("later.example.com")]
    )
    subject = resolver(discover)

    first = await subject.resolve_endpoint(params())
    second = await subject.resolve_endpoint(params())

    assert first.uri.host == REGIONAL_HOST
    assert second.uri.host == "later.example.com"
    assert discover.await_count == 2


async def test_fallback_propagates_regional_resolution_failure() -> None:
    discover = AsyncMock(return_value=[])

    with pytest.raises(EndpointResolutionError):
        await resolver(discover).resolve_endpoint(params(DiscoveryConfig(region=None)))


async def test_disabled_discovery_bypasses_cache_and_discovery() -> None:
    discover = AsyncMock()
    cache = EndpointCache()
    cache.put(SHARED_CACHE_KEY, "cached.example.com", 10)
    config = DiscoveryConfig(endpoint_discovery_enabled=False)

    endpoint = await resolver(discover, cache).resolve_endpoint(params(config))

    assert endpoint.uri.host == REGIONAL_HOST
    discover.assert_not_awaited()


async def test_operation_without_discovery_uses_regional_endpoint() -> None:
    discover = AsyncMock()
    cache = EndpointCache()
    cache.put(SHARED_CACHE_KEY, "cached.example.com", 10)

    endpoint = await resolver(discover, cache).resolve_endpoint(
        params(operation=NOT_DISCOVERED)
    )

    assert endpoint.uri.host == REGIONAL_HOST
    discover.assert_not_awaited()


async def test_explicit_endpoint_still_discovers() -> None:
    discover = AsyncMock(return_value=endpoints("discovered.example.com"))
    cache = EndpointCache()
    config = DiscoveryConfig(endpoint_uri="http://localhost:8000")

    endpoint = await resolver(discover, cache).resolve_endpoint(params(config))

    assert endpoint.uri.host == "discovered.example.com"
    assert cache.get(SHARED_CACHE_KEY) == "discovered.example.com"
    discover.assert_awaited_once()


async def test_explicit_endpoint_is_the_fallback() -> None:
    discover = AsyncMock(return_value=[])
    config = DiscoveryConfig(endpoint_uri="http://localhost:8000")

    endpoint = await resolver(discover).resolve_endpoint(params(config))

    assert endpoint.uri.host == "localhost"
    assert endpoint.uri.port == 8000


async def test_first_of_many_endpoints_is_used() -> None:
    discover = AsyncMock(
        return_value=endpoints("first.example.com", "second.example.com")
    )
    cache = EndpointCache()

    endpoint = await resolver(discover, cache).resolve_endpoint(params())

    assert endpoint.uri.host == "first.example.com"
    assert cache.get(SHARED_CACHE_KEY) == "first.example.com"


async def test_zero_cache_period_is_used_but_not_kept() -> None:
    discover = AsyncMock(return_value=endpoints("brief.example.com", period=0))
    subject = resolver(discover)

    first = await subject.resolve_endpoint(params())
    second = await subject.resolve_endpoint(params())

    assert first.uri.host == "brief.example.com"
    assert second.uri.host == "brief.example.com"
    assert discover.await_count == 2


async def test_discovered_address_uses_config_scheme_and_port() -> None:
    discover = AsyncMock(return_value=endpoints("discovered.example.com:8443"))

    endpoint = await resolver(discover).resolve_endpoint(
        params(DiscoveryConfig(scheme="http"))
    )

    assert endpoint.uri.scheme == "http"
    assert endpoint.uri.host == "discovered.example.com"
    assert endpoint.uri.port == 8443


async def test_concurrent_misses_share_one_discovery() -> None:
    release = asyncio.Event()

    async def discover() -> list[DiscoveredEndpoint]:
        await release.wait()
        return endpoints("discovered.example.com")

    mock = AsyncMock(side_effect=discover)
    subject = resolver(mock)

    waiters = [
        asyncio.create_task(subject.resolve_endpoint(params())) for _ in range(5)
    ]
    await asyncio.sleep(0)
    release.set()
    results = await asyncio.gather(*waiters)

    assert {result.uri.host for result in results} == {"discovered.example.com"}
    mock.assert_awaited_once()


async def test_concurrent_misses_share_one_failure() -> None:
    release = asyncio.Event()

    async def discover() -> list[DiscoveredEndpoint]:
        await release.wait()
        raise SmithyError("discovery unavailable")

    mock = AsyncMock(side_effect=discover)
    subject = resolver(mock)

    waiters = [
        asyncio.create_task(subject.resolve_endpoint(params())) for _ in range(3)
    ]
    await asyncio.sleep(0)
    release.set()
    results = await asyncio.gather(*waiters)

    assert {result.uri.host for result in results} == {REGIONAL_HOST}
    mock.assert_awaited_once()


async def test_cancelled_waiter_does_not_cancel_shared_discovery() -> None:
    release = asyncio.Event()

    async def discover() -> list[DiscoveredEndpoint]:
        await release.wait()
        return endpoints("discovered.example.com")

    mock = AsyncMock(side_effect=discover)
    cache = EndpointCache()
    subject = resolver(mock, cache)

    cancelled = asyncio.create_task(subject.resolve_endpoint(params()))
    survivor = asyncio.create_task(subject.resolve_endpoint(params()))
    await asyncio.sleep(0)
    cancelled.cancel()
    release.set()

    result = await survivor
    with pytest.raises(asyncio.CancelledError):
        await cancelled

    assert result.uri.host == "discovered.example.com"
    assert cache.get(SHARED_CACHE_KEY) == "discovered.example.com"
    mock.assert_awaited_once()


async def test_evict_forces_rediscovery() -> None:
    discover = AsyncMock(
        side_effect=[endpoints("old.example.com"), endpoints("new.example.com")]
    )
    subject = resolver(discover)

    first = await subject.resolve_endpoint(params())
    subject.evict()
    second = await subject.resolve_endpoint(params())

    assert first.uri.host == "old.example.com"
    assert second.uri.host == "new.example.com"


async def test_evict_keeps_a_different_address() -> None:
    cache = EndpointCache()
    cache.put(SHARED_CACHE_KEY, "new.example.com", 10)
    subject = resolver(AsyncMock(), cache)

    subject.evict("old.example.com")
    assert cache.get(SHARED_CACHE_KEY) == "new.example.com"

    subject.evict("new.example.com")
    assert cache.get(SHARED_CACHE_KEY) is None


async def test_discovered_address_is_recorded_in_context() -> None:
    discover = AsyncMock(return_value=endpoints("discovered.example.com"))
    discovered = params()
    regional = params(operation=NOT_DISCOVERED)
    subject = resolver(discover)

    await subject.resolve_endpoint(discovered)
    await subject.resolve_endpoint(regional)

    assert discovered.context[DISCOVERED_ADDRESS] == "discovered.example.com"
    assert DISCOVERED_ADDRESS not in regional.context


def test_address_to_uri() -> None:
    uri = address_to_uri("dynamodb.us-east-1.amazonaws.com", "https")
    assert uri == URI(scheme="https", host="dynamodb.us-east-1.amazonaws.com")


@pytest.mark.parametrize("address", ["", "host/path", "host:notaport", "host?x=1"])
def test_address_to_uri_rejects_invalid_addresses(address: str) -> None:
    with pytest.raises(EndpointResolutionError):
        address_to_uri(address, "https")
