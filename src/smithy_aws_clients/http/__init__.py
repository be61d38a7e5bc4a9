#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections import Counter, OrderedDict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..interfaces import URI
from ..interfaces import http as interfaces
from ..interfaces.http import FieldPosition


class Field(interfaces.Field):
    """A name-value pair representing a single field in an HTTP Request or Response.

    All field names are case insensitive and case-variance must be treated as
    equivalent. Names are preserved as given for transmission.
    """

    def __init__(
        self,
        *,
        name: str,
        values: Iterable[str] | None = None,
        kind: FieldPosition = FieldPosition.HEADER,
    ):
        self.name = name
        self.values: list[str] = list(values) if values is not None else []
        self.kind = kind

    def add(self, value: str) -> None:
        self.values.append(value)

    def set(self, values: list[str]) -> None:
        self.values = values

    def as_string(self) -> str:
        """Get comma-delimited string of all values.

        Values containing commas or double quotes are quoted when more than one value
        is present.
        """
        if not self.values:
            return ""
        if len(self.values) == 1:
            return self.values[0]
        return ", ".join(quote_and_escape_field_value(val) for val in self.values)

    def as_tuples(self) -> list[tuple[str, str]]:
        return [(self.name, val) for val in self.values]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return False
        return (
            self.name == other.name
            and self.kind is other.kind
            and self.values == other.values
        )

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, value={self.values!r}, kind={self.kind!r})"


class Fields(interfaces.Fields):
    def __init__(
        self,
        initial: Iterable[interfaces.Field] | None = None,
        *,
        encoding: str = "utf-8",
    ):
        """Collection of header and trailer entries mapped by name.

        :param initial: Initial list of ``Field`` objects.
        :param encoding: The string encoding used when converting names and values
            to bytes for transmission.
        """
        init_fields = list(initial) if initial is not None else []
        init_names = [self._normalize_field_name(fld.name) for fld in init_fields]
        repeated = [name for name, num in Counter(init_names).items() if num > 1]
        if repeated:
            raise ValueError(
                "Field names of the initial list of fields must be unique. The "
                "following normalized field names appear more than once: "
                f"{', '.join(repeated)}."
            )
        self.entries: OrderedDict[str, interfaces.Field] = OrderedDict(
            zip(init_names, init_fields)
        )
        self.encoding: str = encoding

    def set_field(self, field: interfaces.Field) -> None:
        self[field.name] = field

    def __setitem__(self, name: str, field: interfaces.Field) -> None:
        normalized_name = self._normalize_field_name(name)
        if normalized_name != self._normalize_field_name(field.name):
            raise ValueError(
                f"Supplied key {name} does not match Field.name "
                f"provided: {field.name}"
            )
        self.entries[normalized_name] = field

    def get(
        self, key: str, default: interfaces.Field | None = None
    ) -> interfaces.Field | None:
        return self[key] if key in self else default

    def __getitem__(self, name: str) -> interfaces.Field:
        return self.entries[self._normalize_field_name(name)]

    def __delitem__(self, name: str) -> None:
        del self.entries[self._normalize_field_name(name)]

    def get_by_type(self, kind: FieldPosition) -> list[interfaces.Field]:
        return [entry for entry in self.entries.values() if entry.kind is kind]

    def _normalize_field_name(self, name: str) -> str:
        return name.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fields):
            return False
        return self.encoding == other.encoding and self.entries == other.entries

    def __iter__(self) -> Iterator[interfaces.Field]:
        yield from self.entries.values()

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Fields({self.entries})"

    def __contains__(self, key: str) -> bool:
        return self._normalize_field_name(key) in self.entries


def quote_and_escape_field_value(value: str) -> str:
    """Escapes and quotes a single :class:`Field` value if necessary."""
    if any(char in (",", '"') for char in value):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return value


def tuples_to_fields(
    tuples: Iterable[tuple[str, str]], *, kind: FieldPosition | None = None
) -> Fields:
    """Convert ``name``, ``value`` tuples to a ``Fields`` object.

    Each tuple represents one value; repeated names are merged into one ``Field``.

    :param kind: The Field kind to define for all tuples.
    """
    fields = Fields()
    for name, value in tuples:
        try:
            fields[name].add(value)
        except KeyError:
            fields[name] = Field(
                name=name, values=[value], kind=kind or FieldPosition.HEADER
            )

    return fields


@dataclass(kw_only=True)
class HTTPRequest(interfaces.HTTPRequest):
    """A concrete HTTP request."""

    destination: URI
    method: str
    fields: interfaces.Fields = field(default_factory=Fields)
    body: bytes = field(repr=False, default=b"")


@dataclass(kw_only=True)
class HTTPResponse:
    """Basic implementation of :py:class:`..interfaces.http.HTTPResponse`.

    The body is always fully buffered.
    """

    status: int
    """The 3 digit response status code (1xx, 2xx, 3xx, 4xx, 5xx)."""

    fields: interfaces.Fields = field(default_factory=Fields)
    """HTTP header and trailer fields."""

    body: bytes = field(repr=False, default=b"")
    """The response payload."""

    reason: str | None = None
    """Optional string provided by the server explaining the status."""

    async def consume_body_async(self) -> bytes:
        return self.body
