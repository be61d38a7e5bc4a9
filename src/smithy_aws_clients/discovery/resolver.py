#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Final, Protocol
from urllib.parse import urlsplit

from .. import URI
from ..endpoints import Endpoint, EndpointResolverParams
from ..exceptions import EndpointResolutionError, SmithyError
from ..interfaces import EndpointResolver
from ..operations import DiscoveryMode
from ..types import PropertyKey
from .cache import EndpointCache

logger: Final = logging.getLogger(__name__)

SHARED_CACHE_KEY: Final = "Shared"
"""The key every discovered endpoint is cached under.

A discovered endpoint is shared by all operations and tables used through a client.
"""


class EndpointDiscoveryConfig(Protocol):
    """A config that can enable endpoint discovery."""

    endpoint_discovery_enabled: bool
    scheme: str


ENDPOINT_DISCOVERY_CONFIG = PropertyKey(
    key="config", value_type=EndpointDiscoveryConfig
)
"""Property containing a config that can enable endpoint discovery."""

DISCOVERED_ADDRESS = PropertyKey(key="discovered_address", value_type=str)
"""Property set to the discovered address a request was sent to."""


class DiscoveredEndpoint(Protocol):
    """An endpoint returned by a discovery operation."""

    address: str | None
    """The endpoint address, in the form ``host[:port]``."""

    cache_period_in_minutes: int | None
    """How long the endpoint may be used for."""


type DiscoverEndpoints = Callable[[], Awaitable[Sequence[DiscoveredEndpoint]]]


def address_to_uri(address: str, scheme: str) -> URI:
    """Build a URI from a discovered ``host[:port]`` address.

    :raises EndpointResolutionError: If the address isn't a valid host and port.
    """
    try:
        parsed = urlsplit(f"//{address}")
        port = parsed.port
        if not parsed.hostname or parsed.path or parsed.query:
            raise ValueError(address)
        return URI(scheme=scheme, host=parsed.hostname, port=port)
    except (ValueError, SmithyError) as e:
        raise EndpointResolutionError(
            f"Invalid discovered endpoint address: {address!r}"
        ) from e


class EndpointDiscoveryResolver(EndpointResolver):
    """Resolves endpoints through a discovery operation, backed by a cache.

    Operations without discovery and clients with discovery disabled always use the
    static resolver, which is also where the discovery operation itself is sent.
    Otherwise the cached address is used when present. On a miss the discovery
    operation is called, and the first endpoint it returns is cached for its
    advertised period and used. Discovery failures are logged and the request falls
    back to the static resolver, whose own failures are raised.

    Concurrent misses for the same key share a single discovery call.
    """

    def __init__(
        self,
        *,
        static_resolver: EndpointResolver,
        cache: EndpointCache,
        discover: DiscoverEndpoints,
        cache_key: str = SHARED_CACHE_KEY,
    ) -> None:
        """
        :param static_resolver: Resolves the endpoint when discovery isn't used or
            doesn't produce one.
        :param cache: The cache discovered addresses are stored in.
        :param discover: Calls the service's discovery operation.
        :param cache_key: The key discovered addresses are cached under.
        """
        self._static_resolver = static_resolver
        self._cache = cache
        self._discover_endpoints = discover
        self._cache_key = cache_key
        self._in_flight: dict[str, asyncio.Task[str | None]] = {}

    @property
    def cache(self) -> EndpointCache:
        return self._cache

    async def resolve_endpoint(self, params: EndpointResolverParams[Any]) -> Endpoint:
        if self._uses_discovery(params):
            address = self._cache.get(self._cache_key)
            if address is not None:
                logger.debug("Using cached endpoint %s", address)
            else:
                address = await self._discover()

            if address is not None:
                config = params.context[ENDPOINT_DISCOVERY_CONFIG]
                params.context[DISCOVERED_ADDRESS] = address
                return Endpoint(uri=address_to_uri(address, config.scheme))

        return await self._static_resolver.resolve_endpoint(params)

    def evict(self, address: str | None = None) -> None:
        """Drop the cached endpoint so that the next request rediscovers it.

        :param address: If given, the endpoint is only dropped while the cache still
            holds this address.
        """
        self._cache.evict(self._cache_key, address)

    def _uses_discovery(self, params: EndpointResolverParams[Any]) -> bool:
        if params.operation.discovery is DiscoveryMode.NONE:
            return False

        config = params.context.get(ENDPOINT_DISCOVERY_CONFIG)
        return config is not None and config.endpoint_discovery_enabled

    async def _discover(self) -> str | None:
        key = self._cache_key
        task = self._in_flight.get(key)
        if task is None:
            task = asyncio.create_task(self._run_discovery())
            self._in_flight[key] = task
            task.add_done_callback(self._clear_in_flight)
        else:
            logger.debug("Waiting on in-flight endpoint discovery for %s", key)

        # Cancelling one waiter must not cancel the discovery other waiters share.
        return await asyncio.shield(task)

    def _clear_in_flight(self, task: "asyncio.Task[str | None]") -> None:
        if self._in_flight.get(self._cache_key) is task:
            del self._in_flight[self._cache_key]

    async def _run_discovery(self) -> str | None:
        logger.debug("Calling endpoint discovery for %s", self._cache_key)
        try:
            endpoints = await self._discover_endpoints()
        except SmithyError as e:
            logger.error(
                "Failed to discover endpoints %s. Endpoint discovery is not required "
                "for this operation, falling back to the regional endpoint.",
                e,
            )
            return None

        if not endpoints or not endpoints[0].address:
            logger.error(
                "Endpoint discovery returned no endpoints, falling back to the "
                "regional endpoint."
            )
            return None

        endpoint = endpoints[0]
        address: str = endpoint.address  # type: ignore[assignment]
        try:
            address_to_uri(address, "https")
        except EndpointResolutionError as e:
            logger.error("%s, falling back to the regional endpoint.", e)
            return None

        self._cache.put(self._cache_key, address, endpoint.cache_period_in_minutes or 0)
        return address
