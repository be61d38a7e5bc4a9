#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import asyncio
import json
import logging
from typing import Any

import pytest

from smithy_aws_clients.config import Config
from smithy_aws_clients.discovery import EndpointCache
from smithy_aws_clients.exceptions import MissingParameterError, SmithyError
from smithy_aws_clients.http import HTTPRequest, HTTPResponse
from smithy_aws_clients.services.dynamodb import DynamoDBClient
from smithy_aws_clients.services.dynamodb.errors import (
    ConditionalCheckFailedException,
    InvalidEndpointException,
    ResourceNotFoundException,
    TransactionCanceledException,
)
from smithy_aws_clients.services.dynamodb.models import (
    ExecuteStatementInput,
    GetItemInput,
    ListTablesInput,
    ListTablesOutput,
    Put,
    PutItemInput,
    TransactWriteItem,
    TransactWriteItemsInput,
)
from smithy_aws_clients.testing import MockHTTPClient, json_response

REGIONAL_HOST = "dynamodb.us-west-2.amazonaws.com"
DISCOVERED_HOST = "discovered.dynamodb.example.com"
KEY = {"Artist": {"S": "No One You Know"}, "SongTitle": {"S": "Call Me Today"}}


def client_config(transport: MockHTTPClient, **kwargs: Any) -> Config:
    return Config(
        transport=transport,
        region="us-west-2",
        aws_access_key_id="AKID",
        aws_secret_access_key="SECRET",
        **kwargs,
    )


def queue_discovery(
    transport: MockHTTPClient, address: str = DISCOVERED_HOST, period: int = 1440
) -> None:
    json_response(
        transport,
        {"Endpoints": [{"Address": address, "CachePeriodInMinutes": period}]},
    )


def target(transport: MockHTTPClient, index: int) -> str:
    return transport.captured_requests[index].fields["X-Amz-Target"].as_string()


def host(transport: MockHTTPClient, index: int) -> str:
    return transport.captured_requests[index].destination.host


async def test_get_item_request() -> None:
    transport = MockHTTPClient()
    json_response(transport, {"Item": {"Artist": {"S": "No One You Know"}}})
    client = DynamoDBClient(client_config(transport))

    output = await client.get_item(
        GetItemInput(table_name="Music", key=KEY, consistent_read=True)
    )

    assert output.item == {"Artist": {"S": "No One You Know"}}
    request = transport.captured_requests[0]
    assert request.method == "POST"
    assert request.destination.build() == f"https://{REGIONAL_HOST}/"
    assert target(transport, 0) == "DynamoDB_20120810.GetItem"
    assert request.fields["Content-Type"].as_string() == "application/x-amz-json-1.0"
    assert request.fields["Authorization"].as_string().startswith("AWS4-HMAC-SHA256")
    assert json.loads(request.body) == {
        "TableName": "Music",
        "Key": KEY,
        "ConsistentRead": True,
    }


async def test_missing_required_member_makes_no_request() -> None:
    transport = MockHTTPClient()
    client = DynamoDBClient(client_config(transport, endpoint_discovery_enabled=True))

    with pytest.raises(MissingParameterError, match=r"Missing required field \[Key\]"):
        await client.get_item(GetItemInput(table_name="Music"))

    assert transport.call_count == 0


async def test_discovery_disabled_by_default() -> None:
    transport = MockHTTPClient()
    json_response(transport, {"TableNames": []})
    client = DynamoDBClient(client_config(transport))

    await client.list_tables(ListTablesInput())

    assert transport.call_count == 1
    assert host(transport, 0) == REGIONAL_HOST


async def test_discovered_endpoint_is_used_and_cached() -> None:
    transport = MockHTTPClient()
    queue_discovery(transport)
    json_response(transport, {"TableNames": ["Music"]})
    json_response(transport, {"TableNames": ["Music"]})
    cache = EndpointCache()
    client = DynamoDBClient(
        client_config(transport, endpoint_discovery_enabled=True, endpoint_cache=cache)
    )

    first = await client.list_tables(ListTablesInput())
    second = await client.list_tables(ListTablesInput())

    assert first == second == ListTablesOutput(table_names=["Music"])
    assert transport.call_count == 3
    assert target(transport, 0) == "DynamoDB_20120810.DescribeEndpoints"
    assert host(transport, 0) == REGIONAL_HOST
    assert host(transport, 1) == DISCOVERED_HOST
    assert host(transport, 2) == DISCOVERED_HOST
    assert cache.get("Shared") == DISCOVERED_HOST


async def test_discovered_requests_are_signed_for_the_region() -> None:
    transport = MockHTTPClient()
    queue_discovery(transport)
    json_response(transport, {})
    client = DynamoDBClient(client_config(transport, endpoint_discovery_enabled=True))

    await client.get_item(GetItemInput(table_name="Music", key=KEY))

    request = transport.captured_requests[1]
    assert request.fields["Host"].as_string() == DISCOVERED_HOST
    assert "/us-west-2/dynamodb/aws4_request" in (
        request.fields["Authorization"].as_string()
    )


async def test_cache_is_shared_between_clients() -> None:
    transport = MockHTTPClient()
    queue_discovery(transport)
    json_response(transport, {})
    json_response(transport, {})
    cache = EndpointCache()

    first = DynamoDBClient(
        client_config(transport, endpoint_discovery_enabled=True, endpoint_cache=cache)
    )
    second = DynamoDBClient(
        client_config(transport, endpoint_discovery_enabled=True, endpoint_cache=cache)
    )
    await first.list_tables(ListTablesInput())
    await second.list_tables(ListTablesInput())

    assert transport.call_count == 3
    assert host(transport, 2) == DISCOVERED_HOST


async def test_operation_without_discovery_uses_regional_endpoint() -> None:
    transport = MockHTTPClient()
    json_response(transport, {"Items": []})
    client = DynamoDBClient(client_config(transport, endpoint_discovery_enabled=True))

    await client.execute_statement(ExecuteStatementInput(statement="SELECT * FROM Music"))

    assert transport.call_count == 1
    assert target(transport, 0) == "DynamoDB_20120810.ExecuteStatement"
    assert host(transport, 0) == REGIONAL_HOST


async def test_explicit_endpoint_serves_discovery() -> None:
    transport = MockHTTPClient()
    queue_discovery(transport, "localhost:8001")
    json_response(transport, {"TableNames": []})
    cache = EndpointCache()
    client = DynamoDBClient(
        client_config(
            transport,
            endpoint_discovery_enabled=True,
            endpoint_uri="http://localhost:8000",
            endpoint_cache=cache,
            scheme="http",
        )
    )

    await client.list_tables(ListTablesInput())

    assert transport.call_count == 2
    assert target(transport, 0) == "DynamoDB_20120810.DescribeEndpoints"
    assert transport.captured_requests[0].destination.build() == "http://localhost:8000/"
    assert target(transport, 1) == "DynamoDB_20120810.ListTables"
    assert transport.captured_requests[1].destination.build() == "http://localhost:8001/"
    assert cache.get("Shared") == "localhost:8001"


async def test_discovery_failure_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    transport = MockHTTPClient()
    json_response(
        transport,
        {"__type": "AccessDeniedException", "message": "not allowed"},
        status=400,
    )
    json_response(transport, {"TableNames": []})
    cache = EndpointCache()
    client = DynamoDBClient(
        client_config(transport, endpoint_discovery_enabled=True, endpoint_cache=cache)
    )

    with caplog.at_level(logging.ERROR):
        await client.list_tables(ListTablesInput())

    assert host(transport, 1) == REGIONAL_HOST
    assert len(cache) == 0
    assert "Failed to discover endpoints" in caplog.text


async def test_discovery_transport_error_falls_back() -> None:
    transport = MockHTTPClient()
    transport.add_error(ConnectionError("connection reset"))
    json_response(transport, {"TableNames": []})
    client = DynamoDBClient(client_config(transport, endpoint_discovery_enabled=True))

    await client.list_tables(ListTablesInput())

    assert host(transport, 1) == REGIONAL_HOST


async def test_invalid_endpoint_evicts_cached_endpoint() -> None:
    transport = MockHTTPClient()
    queue_discovery(transport, "old.dynamodb.example.com")
    json_response(
        transport,
        {"__type": "InvalidEndpointException", "Message": "moved"},
        status=421,
    )
    queue_discovery(transport, "new.dynamodb.example.com")
    json_response(transport, {})
    cache = EndpointCache()
    client = DynamoDBClient(
        client_config(transport, endpoint_discovery_enabled=True, endpoint_cache=cache)
    )

    with pytest.raises(InvalidEndpointException):
        await client.get_item(GetItemInput(table_name="Music", key=KEY))
    assert cache.get("Shared") is None

    await client.get_item(GetItemInput(table_name="Music", key=KEY))

    assert transport.call_count == 4
    assert host(transport, 1) == "old.dynamodb.example.com"
    assert target(transport, 2) == "DynamoDB_20120810.DescribeEndpoints"
    assert host(transport, 3) == "new.dynamodb.example.com"


class RediscoveringTransport(MockHTTPClient):
    """Replaces the cached endpoint while a request is in flight."""

    def __init__(self, cache: EndpointCache, address: str) -> None:
        super().__init__()
        self._cache = cache
        self._address = address

    async def send(
        self, request: HTTPRequest, *, request_config: Any = None
    ) -> HTTPResponse:
        response = await super().send(request, request_config=request_config)
        self._cache.put("Shared", self._address, 1440)
        return response


async def test_invalid_endpoint_keeps_newer_cached_endpoint() -> None:
    cache = EndpointCache()
    cache.put("Shared", "old.dynamodb.example.com", 1440)
    transport = RediscoveringTransport(cache, "new.dynamodb.example.com")
    json_response(
        transport,
        {"__type": "InvalidEndpointException", "Message": "moved"},
        status=421,
    )
    client = DynamoDBClient(
        client_config(transport, endpoint_discovery_enabled=True, endpoint_cache=cache)
    )

    with pytest.raises(InvalidEndpointException):
        await client.get_item(GetItemInput(table_name="Music", key=KEY))

    assert host(transport, 0) == "old.dynamodb.example.com"
    assert cache.get("Shared") == "new.dynamodb.example.com"


async def test_invalid_endpoint_without_discovery_keeps_cache() -> None:
    transport = MockHTTPClient()
    json_response(
        transport,
        {"__type": "InvalidEndpointException", "Message": "moved"},
        status=421,
    )
    cache = EndpointCache()
    cache.put("Shared", DISCOVERED_HOST, 1440)
    client = DynamoDBClient(
        client_config(transport, endpoint_discovery_enabled=True, endpoint_cache=cache)
    )

    with pytest.raises(InvalidEndpointException):
        await client.execute_statement(
            ExecuteStatementInput(statement="SELECT * FROM Music")
        )

    assert host(transport, 0) == REGIONAL_HOST
    assert cache.get("Shared") == DISCOVERED_HOST


async def test_oversized_cache_period_is_clamped() -> None:
    transport = MockHTTPClient()
    queue_discovery(transport, period=9223372036854775807)
    json_response(transport, {"TableNames": []})
    json_response(transport, {"TableNames": []})
    cache = EndpointCache()
    client = DynamoDBClient(
        client_config(transport, endpoint_discovery_enabled=True, endpoint_cache=cache)
    )

    await client.list_tables(ListTablesInput())
    await client.list_tables(ListTablesInput())

    assert transport.call_count == 3
    assert host(transport, 1) == DISCOVERED_HOST
    assert host(transport, 2) == DISCOVERED_HOST
    assert cache.get("Shared") == DISCOVERED_HOST


async def test_concurrent_calls_share_one_discovery() -> None:
    transport = MockHTTPClient(delay=0.01)
    queue_discovery(transport)
    for _ in range(3):
        json_response(transport, {})
    client = DynamoDBClient(client_config(transport, endpoint_discovery_enabled=True))

    await asyncio.gather(
        *(client.get_item(GetItemInput(table_name="Music", key=KEY)) for _ in range(3))
    )

    targets = [target(transport, i) for i in range(transport.call_count)]
    assert targets.count("DynamoDB_20120810.DescribeEndpoints") == 1
    assert targets.count("DynamoDB_20120810.GetItem") == 3


async def test_resource_not_found() -> None:
    transport = MockHTTPClient()
    json_response(
        transport,
        {
            "__type": "com.amazonaws.dynamodb.v20120810#ResourceNotFoundException",
            "message": "Requested resource not found",
        },
        status=400,
        headers=[("x-amzn-RequestId", "ABC123")],
    )
    client = DynamoDBClient(client_config(transport))

    with pytest.raises(ResourceNotFoundException) as exc_info:
        await client.get_item(GetItemInput(table_name="Missing", key=KEY))

    assert exc_info.value.request_id == "ABC123"
    assert exc_info.value.message == "Requested resource not found"


async def test_conditional_check_failed_returns_item() -> None:
    transport = MockHTTPClient()
    json_response(
        transport,
        {
            "__type": "com.amazonaws.dynamodb.v20120810#ConditionalCheckFailedException",
            "message": "The conditional request failed",
            "Item": {"Plays": {"N": "3"}},
        },
        status=400,
    )
    client = DynamoDBClient(client_config(transport))

    with pytest.raises(ConditionalCheckFailedException) as exc_info:
        await client.put_item(
            PutItemInput(
                table_name="Music",
                item={"Plays": {"N": "4"}},
                condition_expression="attribute_not_exists(Plays)",
                return_values_on_condition_check_failure="ALL_OLD",
            )
        )

    assert exc_info.value.item == {"Plays": {"N": "3"}}


async def test_transaction_canceled_reasons() -> None:
    transport = MockHTTPClient()
    json_response(
        transport,
        {
            "__type": "com.amazonaws.dynamodb.v20120810#TransactionCanceledException",
            "Message": "Transaction cancelled",
            "CancellationReasons": [
                {"Code": "ConditionalCheckFailed", "Message": "failed"},
                {"Code": "None"},
            ],
        },
        status=400,
    )
    client = DynamoDBClient(client_config(transport))

    with pytest.raises(TransactionCanceledException) as exc_info:
        await client.transact_write_items(
            TransactWriteItemsInput(
                transact_items=[
                    TransactWriteItem(put=Put(table_name="Music", item=KEY)),
                    TransactWriteItem(put=Put(table_name="Music", item=KEY)),
                ]
            )
        )

    reasons = exc_info.value.cancellation_reasons or []
    assert [reason.code for reason in reasons] == ["ConditionalCheckFailed", "None"]
    body = json.loads(transport.captured_requests[0].body)
    assert body["TransactItems"][0] == {"Put": {"TableName": "Music", "Item": KEY}}


async def test_transport_errors_are_wrapped() -> None:
    transport = MockHTTPClient()
    transport.add_error(ConnectionError("connection reset"))
    client = DynamoDBClient(client_config(transport))

    with pytest.raises(SmithyError) as exc_info:
        await client.list_tables(ListTablesInput())

    assert isinstance(exc_info.value.__cause__, ConnectionError)


async def test_submit_runs_operation_in_background() -> None:
    transport = MockHTTPClient()
    json_response(transport, {"TableNames": ["Music"]})
    finished: list[asyncio.Task[ListTablesOutput]] = []

    async with DynamoDBClient(client_config(transport)) as client:
        task = client.submit(client.list_tables(ListTablesInput()), finished.append)
        output = await task
        await asyncio.sleep(0)

    assert output.table_names == ["Music"]
    assert finished == [task]
