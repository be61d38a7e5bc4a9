#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
"""Conversion between modeled shapes and JSON-compatible documents.

Shapes are keyword-only dataclasses. Each member is sent on the wire under its
PascalCase name unless the field's metadata overrides it with ``{"name": ...}``.
Members set to ``None`` are omitted.

Serialization is driven by the runtime value:

* dataclasses become objects,
* ``datetime`` values become epoch seconds,
* ``bytes`` become base64 strings,
* lists and dicts are converted element-wise,
* everything else is passed through unchanged.

Deserialization is driven by the member's type hint, so untyped documents such as
DynamoDB attribute values are returned exactly as they were received.
"""

import base64
from collections.abc import Container, Mapping, Sequence
from dataclasses import Field, fields, is_dataclass
from datetime import datetime
from functools import cache
from types import NoneType, UnionType
from typing import Any, TypeAliasType, Union, get_args, get_origin, get_type_hints

from .exceptions import SerializationError
from .utils import ensure_utc, epoch_seconds_to_datetime, serialize_epoch_seconds


def _pascal_case(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def _wire_name(member: Field[Any]) -> str:
    return member.metadata.get("name", _pascal_case(member.name))


@cache
def _members(shape_type: type) -> tuple[tuple[str, str, Any], ...]:
    hints = get_type_hints(shape_type)
    return tuple(
        (member.name, _wire_name(member), hints[member.name])
        for member in fields(shape_type)
    )


def wire_name(shape_type: type, member_name: str) -> str:
    """Get the name a member is sent under.

    :param shape_type: The dataclass that defines the member.
    :param member_name: The Python attribute name of the member.
    """
    for attr, wire, _ in _members(shape_type):
        if attr == member_name:
            return wire
    raise SerializationError(f"{shape_type.__name__} has no member {member_name}")


def serialize(shape: Any) -> dict[str, Any]:
    """Convert a shape into a JSON-compatible dict."""
    result: dict[str, Any] = {}
    for attr, wire, _ in _members(type(shape)):
        value = getattr(shape, attr)
        if value is not None:
            result[wire] = _serialize_value(value)
    return result


def _serialize_value(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return serialize(value)
    match value:
        case datetime():
            return serialize_epoch_seconds(value)
        case bytes() | bytearray():
            return base64.b64encode(value).decode("ascii")
        case str():
            return value
        case Mapping():
            return {k: _serialize_value(v) for k, v in value.items()}
        case Sequence() | set() | frozenset():
            return [_serialize_value(v) for v in value]
        case _:
            return value


def deserialize[T](shape_type: type[T], document: Mapping[str, Any]) -> T:
    """Build a shape from a JSON-compatible dict.

    Unknown keys are ignored and missing members keep their defaults.
    """
    return shape_type(**deserialize_members(shape_type, document))


def deserialize_members(
    shape_type: type, document: Mapping[str, Any], *, skip: Container[str] = ()
) -> dict[str, Any]:
    """Deserialize the members of a shape that are present in a document.

    :param shape_type: The dataclass to read members of.
    :param document: The JSON-compatible dict to read from.
    :param skip: Names of members to leave out.
    :returns: Constructor keyword arguments keyed by member name.
    """
    if not isinstance(document, Mapping):
        raise SerializationError(
            f"Expected an object for {shape_type.__name__}, found {type(document)}"
        )
    kwargs: dict[str, Any] = {}
    for attr, wire, hint in _members(shape_type):
        if attr not in skip and wire in document:
            kwargs[attr] = _deserialize_value(document[wire], hint)
    return kwargs


def _unwrap(hint: Any) -> Any:
    if isinstance(hint, TypeAliasType):
        return _unwrap(hint.__value__)
    if get_origin(hint) in (Union, UnionType):
        args = [arg for arg in get_args(hint) if arg is not NoneType]
        if len(args) == 1:
            return _unwrap(args[0])
    return hint


def _deserialize_value(value: Any, hint: Any) -> Any:
    if value is None:
        return None

    hint = _unwrap(hint)
    origin = get_origin(hint)
    args = get_args(hint)

    if origin in (list, Sequence) and isinstance(value, list):
        item_hint = args[0] if args else Any
        return [_deserialize_value(item, item_hint) for item in value]

    if origin in (dict, Mapping) and isinstance(value, dict):
        value_hint = args[1] if len(args) == 2 else Any
        return {k: _deserialize_value(v, value_hint) for k, v in value.items()}

    if origin is None and isinstance(hint, type):
        if is_dataclass(hint):
            return deserialize(hint, value)
        if issubclass(hint, datetime):
            return _parse_timestamp(value)
        if issubclass(hint, bytes):
            return base64.b64decode(value)
        if hint is float and isinstance(value, int):
            return float(value)

    return value


def _parse_timestamp(value: Any) -> datetime:
    match value:
        case bool():
            pass
        case int() | float():
            return epoch_seconds_to_datetime(value)
        case str():
            return ensure_utc(datetime.fromisoformat(value))
    raise SerializationError(f"Expected a timestamp, found {type(value)}: {value}")
