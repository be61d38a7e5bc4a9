#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import pytest

from smithy_aws_clients.documents import (
    deserialize,
    deserialize_members,
    serialize,
    wire_name,
)
from smithy_aws_clients.exceptions import SerializationError

type AttributeValue = dict[str, Any]


@dataclass(kw_only=True)
class Capacity:
    read_capacity_units: float | None = None
    write_capacity_units: float | None = None


@dataclass(kw_only=True)
class Shape:
    table_name: str | None = None
    item: dict[str, AttributeValue] | None = None
    items: list[dict[str, AttributeValue]] | None = None
    creation_date_time: datetime | None = None
    capacity: Capacity | None = None
    replicas: list[Capacity] | None = None
    blob: bytes | None = None
    sse_enabled: bool | None = field(default=None, metadata={"name": "SSEEnabled"})


def test_wire_name() -> None:
    assert wire_name(Shape, "table_name") == "TableName"
    assert wire_name(Shape, "sse_enabled") == "SSEEnabled"


def test_wire_name_unknown_member() -> None:
    with pytest.raises(SerializationError):
        wire_name(Shape, "missing")


def test_serialize() -> None:
    shape = Shape(
        table_name="Music",
        item={"Artist": {"S": "No One You Know"}, "Plays": {"N": "3"}},
        creation_date_time=datetime(2024, 1, 1, tzinfo=UTC),
        capacity=Capacity(read_capacity_units=5),
        replicas=[Capacity(write_capacity_units=1)],
        blob=b"hello",
        sse_enabled=False,
    )

    assert serialize(shape) == {
        "TableName": "Music",
        "Item": {"Artist": {"S": "No One You Know"}, "Plays": {"N": "3"}},
        "CreationDateTime": 1704067200,
        "Capacity": {"ReadCapacityUnits": 5},
        "Replicas": [{"WriteCapacityUnits": 1}],
        "Blob": "aGVsbG8=",
        "SSEEnabled": False,
    }


def test_serialize_omits_none() -> None:
    assert serialize(Shape()) == {}


def test_serialize_fractional_timestamp() -> None:
    shape = Shape(creation_date_time=datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=UTC))
    assert serialize(shape) == {"CreationDateTime": 1704067200.5}


def test_deserialize() -> None:
    document = {
        "TableName": "Music",
        "Items": [{"Artist": {"S": "Acme Band"}, "Tags": {"SS": ["a", "b"]}}],
        "CreationDateTime": 1704067200.0,
        "Capacity": {"ReadCapacityUnits": 5, "WriteCapacityUnits": 2.5},
        "Replicas": [{"ReadCapacityUnits": 1}],
        "Blob": "aGVsbG8=",
        "SSEEnabled": True,
        "Unknown": "ignored",
    }

    shape = deserialize(Shape, document)

    assert shape == Shape(
        table_name="Music",
        items=[{"Artist": {"S": "Acme Band"}, "Tags": {"SS": ["a", "b"]}}],
        creation_date_time=datetime(2024, 1, 1, tzinfo=UTC),
        capacity=Capacity(read_capacity_units=5.0, write_capacity_units=2.5),
        replicas=[Capacity(read_capacity_units=1.0)],
        blob=b"hello",
        sse_enabled=True,
    )
    assert isinstance(shape.capacity.read_capacity_units, float)  # type: ignore[union-attr]


def test_deserialize_iso_timestamp() -> None:
    shape = deserialize(Shape, {"CreationDateTime": "2024-01-01T01:00:00+01:00"})
    assert shape.creation_date_time == datetime(2024, 1, 1, tzinfo=UTC)


def test_deserialize_invalid_timestamp() -> None:
    with pytest.raises(SerializationError):
        deserialize(Shape, {"CreationDateTime": True})


def test_deserialize_requires_object() -> None:
    with pytest.raises(SerializationError):
        deserialize(Shape, ["not", "an", "object"])  # type: ignore[arg-type]


def test_deserialize_members_skips() -> None:
    members = deserialize_members(
        Shape, {"TableName": "Music", "SSEEnabled": True}, skip={"table_name"}
    )
    assert members == {"sse_enabled": True}
