#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
import threading
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Final

logger: Final = logging.getLogger(__name__)

_MAX_EXPIRATION: Final = datetime.max.replace(tzinfo=UTC)


@dataclass(kw_only=True, frozen=True)
class CacheEntry:
    """A discovered endpoint address and the time it stops being valid."""

    key: str
    address: str
    """The discovered address, in the form ``host[:port]``."""

    expiration: datetime
    """When the entry expires, always in UTC."""

    @property
    def is_expired(self) -> bool:
        return datetime.now(tz=UTC) >= self.expiration


class EndpointCache:
    """A keyed cache of discovered endpoint addresses with a per-entry TTL.

    There is at most one entry per key. Entries are never swept; an entry that is
    read after it expires is dropped and reported as a miss. Individual calls are
    safe to make from multiple threads.

    .. code-block:: python

        cache = EndpointCache()
        cache.put("Shared", "dynamodb.us-west-2.amazonaws.com", ttl=1440)
        assert cache.get("Shared") == "dynamodb.us-west-2.amazonaws.com"
    """

    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        """Get the address cached under a key.

        :param key: The cache key.
        :returns: The address, or None if there is no entry or the entry has expired.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired:
                logger.debug("Cached endpoint for %s expired at %s", key, entry.expiration)
                del self._entries[key]
                return None
            return entry.address

    def put(self, key: str, address: str, ttl: int | float | timedelta) -> CacheEntry:
        """Store an address under a key, replacing any existing entry.

        :param key: The cache key.
        :param address: The address to store, in the form ``host[:port]``.
        :param ttl: How long the entry is valid for, in minutes or as a timedelta. A
            TTL that isn't positive stores an entry that has already expired. A TTL
            that reaches past the largest datetime is clamped to it.
        """
        now = datetime.now(tz=UTC)
        try:
            if not isinstance(ttl, timedelta):
                ttl = timedelta(minutes=ttl)
            expiration = now + ttl
        except OverflowError:
            positive = ttl > timedelta(0) if isinstance(ttl, timedelta) else ttl > 0
            expiration = _MAX_EXPIRATION if positive else now
        entry = CacheEntry(key=key, address=address, expiration=expiration)
        with self._lock:
            self._entries[key] = entry
        logger.debug("Cached endpoint %s for %s until %s", address, key, entry.expiration)
        return entry

    def evict(self, key: str, address: str | None = None) -> None:
        """Remove the entry for a key, if there is one.

        :param key: The cache key.
        :param address: If given, the entry is only removed while it holds this
            address.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or (address is not None and entry.address != address):
                return
            del self._entries[key]
        logger.debug("Evicted cached endpoint %s for %s", entry.address, key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"EndpointCache(keys={sorted(self._entries)})"
