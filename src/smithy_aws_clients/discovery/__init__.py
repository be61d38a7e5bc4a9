#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from .cache import CacheEntry, EndpointCache
from .resolver import (
    DISCOVERED_ADDRESS,
    ENDPOINT_DISCOVERY_CONFIG,
    SHARED_CACHE_KEY,
    DiscoveredEndpoint,
    EndpointDiscoveryConfig,
    EndpointDiscoveryResolver,
)

__all__ = (
    "CacheEntry",
    "DISCOVERED_ADDRESS",
    "DiscoveredEndpoint",
    "ENDPOINT_DISCOVERY_CONFIG",
    "EndpointCache",
    "EndpointDiscoveryConfig",
    "EndpointDiscoveryResolver",
    "SHARED_CACHE_KEY",
)
