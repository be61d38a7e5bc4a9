#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from datetime import UTC, datetime, timedelta


def ensure_utc(value: datetime) -> datetime:
    """Ensures that the given datetime is a UTC timezone-aware datetime.

    If the datetime isn't timezone-aware, its timezone is set to UTC. If it is aware,
    it's replaced with the equivalent datetime under UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    else:
        return value.astimezone(UTC)


def epoch_seconds_to_datetime(value: int | float) -> datetime:
    """Parse numerical epoch timestamps (seconds since 1970) into a datetime in UTC.

    Falls back to using ``timedelta`` when ``fromtimestamp`` raises ``OverflowError``,
    which happens on platforms whose C localtime() is limited to 1970 through 2038.
    """
    try:
        return datetime.fromtimestamp(value, tz=UTC)
    except OverflowError:
        epoch_zero = datetime(1970, 1, 1, 0, 0, 0, tzinfo=UTC)
        return epoch_zero + timedelta(seconds=value)


def serialize_epoch_seconds(given: datetime) -> float | int:
    """Serializes a datetime into a number of seconds since the epoch.

    Whole seconds are returned as an int, otherwise a float is returned.
    """
    result = ensure_utc(given).timestamp()
    if result.is_integer():
        return int(result)
    return result


def strict_parse_bool(given: str) -> bool:
    """Strictly parses a boolean from a case-insensitive ``true`` or ``false``.

    :raises ValueError: if the given string is neither "true" nor "false".
    """
    match given.lower():
        case "true":
            return True
        case "false":
            return False
        case _:
            raise ValueError(f"Expected 'true' or 'false', found: {given}")
