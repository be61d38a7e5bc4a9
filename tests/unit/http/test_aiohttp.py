#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from unittest.mock import AsyncMock, MagicMock, Mock

import aiohttp

from smithy_aws_clients import URI
from smithy_aws_clients.http import Field, Fields, HTTPRequest
from smithy_aws_clients.http.aiohttp import AIOHTTPClient
from smithy_aws_clients.interfaces.http import HTTPRequestConfiguration


def mock_session(
    status: int = 200, body: bytes = b"{}", headers: dict[str, str] | None = None
) -> MagicMock:
    response = Mock(status=status, reason="OK", headers=headers or {})
    response.read = AsyncMock(return_value=body)
    session = MagicMock()
    session.request.return_value.__aenter__.return_value = response
    session.close = AsyncMock()
    return session


async def test_send() -> None:
    session = mock_session(headers={"x-amzn-RequestId": "req-1"})
    client = AIOHTTPClient(_session=session)
    request = HTTPRequest(
        destination=URI(host="dynamodb.us-west-2.amazonaws.com", path="/", query="a=1"),
        method="POST",
        fields=Fields([Field(name="Content-Type", values=["application/json"])]),
        body=b'{"TableName": "Music"}',
    )

    response = await client.send(
        request, request_config=HTTPRequestConfiguration(read_timeout=5)
    )

    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "https://dynamodb.us-west-2.amazonaws.com/"
    assert kwargs["params"] == [("a", "1")]
    assert kwargs["headers"] == [("Content-Type", "application/json")]
    assert kwargs["data"] == b'{"TableName": "Music"}'
    assert kwargs["timeout"] == aiohttp.ClientTimeout(sock_read=5)

    assert response.status == 200
    assert response.body == b"{}"
    assert response.fields["x-amzn-RequestId"].values == ["req-1"]


async def test_close() -> None:
    session = mock_session()
    client = AIOHTTPClient(_session=session)

    await client.close()
    await client.close()

    session.close.assert_awaited_once()
