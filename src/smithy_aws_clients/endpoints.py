#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import re
from dataclasses import dataclass, field
from typing import Any, Protocol
from urllib.parse import urlparse

from . import URI
from .exceptions import EndpointResolutionError, SmithyError
from .interfaces import Endpoint as _Endpoint
from .interfaces import EndpointResolver
from .interfaces import TypedProperties as _TypedProperties
from .interfaces import URI as _URI
from .operations import OperationSpec
from .types import PropertyKey, TypedProperties

_REGION_RE = re.compile(r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$")

# Ordered so that the longest matching prefix wins.
_DNS_SUFFIXES: tuple[tuple[str, str], ...] = (
    ("us-isob-", "sc2s.sgov.gov"),
    ("us-iso-", "c2s.ic.gov"),
    ("cn-", "amazonaws.com.cn"),
)
_DEFAULT_DNS_SUFFIX = "amazonaws.com"


@dataclass(kw_only=True)
class Endpoint(_Endpoint):
    """A resolved endpoint."""

    uri: _URI
    """The endpoint URI."""

    properties: _TypedProperties = field(default_factory=TypedProperties)
    """Properties required to interact with the endpoint."""


@dataclass(kw_only=True)
class EndpointResolverParams[I]:
    """Parameters passed into an Endpoint Resolver's resolve_endpoint method."""

    operation: OperationSpec[I, Any]
    """The operation to resolve an endpoint for."""

    input: I
    """The input to the operation."""

    context: _TypedProperties
    """The context of the operation invocation."""


class StaticEndpointConfig(Protocol):
    """A config that has a static endpoint."""

    endpoint_uri: str | URI | None
    """A static endpoint to use for the request."""


STATIC_ENDPOINT_CONFIG = PropertyKey(key="config", value_type=StaticEndpointConfig)
"""Property containing a config that has a static endpoint."""


class RegionalEndpointConfig(StaticEndpointConfig, Protocol):
    """Endpoint config for services with standard regional endpoints."""

    region: str | None
    """The AWS region to address the request to."""

    scheme: str
    """The scheme used for endpoints built from a hostname."""


REGIONAL_ENDPOINT_CONFIG = PropertyKey(key="config", value_type=RegionalEndpointConfig)
"""Endpoint config for services with standard regional endpoints."""


def resolve_static_uri(
    properties: _TypedProperties | EndpointResolverParams[Any],
) -> _URI | None:
    """Attempt to resolve a static URI from the endpoint resolver params.

    :param properties: A TypedProperties bag or EndpointResolverParams to search.
    :raises EndpointResolutionError: If the configured URI can't be parsed.
    """
    properties = (
        properties.context
        if isinstance(properties, EndpointResolverParams)
        else properties
    )
    static_uri_config = properties.get(STATIC_ENDPOINT_CONFIG)
    if static_uri_config is None or static_uri_config.endpoint_uri is None:
        return None

    static_uri = static_uri_config.endpoint_uri

    # If it's not a string, it's already a parsed URI so just pass it along.
    if not isinstance(static_uri, str):
        return static_uri

    try:
        parsed = urlparse(static_uri)
        port = parsed.port
    except ValueError as e:
        raise EndpointResolutionError(
            f"Unable to parse provided URI: {static_uri}"
        ) from e

    if parsed.hostname is None:
        raise EndpointResolutionError(
            f"Unable to parse hostname from provided URI: {static_uri}"
        )

    try:
        return URI(
            host=parsed.hostname,
            path=parsed.path or None,
            scheme=parsed.scheme,
            query=parsed.query or None,
            port=port,
        )
    except SmithyError as e:
        raise EndpointResolutionError(str(e)) from e


def dns_suffix(region: str) -> str:
    """Get the DNS suffix of the partition a region belongs to."""
    for prefix, suffix in _DNS_SUFFIXES:
        if region.startswith(prefix):
            return suffix
    return _DEFAULT_DNS_SUFFIX


class StaticEndpointResolver(EndpointResolver):
    """A basic endpoint resolver that forwards a static URI."""

    async def resolve_endpoint(self, params: EndpointResolverParams[Any]) -> Endpoint:
        static_uri = resolve_static_uri(params)

        if static_uri is None:
            raise EndpointResolutionError(
                "Unable to resolve endpoint: endpoint_uri is required"
            )

        return Endpoint(uri=static_uri)


class StandardRegionalEndpointsResolver(EndpointResolver):
    """Resolves endpoints for services with standard regional endpoints.

    An explicit ``endpoint_uri`` always wins. Otherwise the endpoint is
    ``{scheme}://{endpoint_prefix}.{region}.{dns_suffix}``.
    """

    def __init__(self, endpoint_prefix: str):
        self._endpoint_prefix = endpoint_prefix

    async def resolve_endpoint(self, params: EndpointResolverParams[Any]) -> Endpoint:
        if (static_uri := resolve_static_uri(params)) is not None:
            return Endpoint(uri=static_uri)

        region_config = params.context.get(REGIONAL_ENDPOINT_CONFIG)
        if region_config is not None and region_config.region is not None:
            region = region_config.region
            if not _REGION_RE.match(region):
                raise EndpointResolutionError(f"Invalid region: {region!r}")

            hostname = f"{self._endpoint_prefix}.{region}.{dns_suffix(region)}"
            return Endpoint(uri=URI(scheme=region_config.scheme, host=hostname))

        raise EndpointResolutionError(
            "Unable to resolve endpoint - either endpoint_uri or region are required."
        )
