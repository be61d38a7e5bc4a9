#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

import asyncio
from collections import deque
from copy import copy
from typing import Any

from ..http import HTTPResponse, tuples_to_fields
from ..interfaces.http import HTTPClient, HTTPRequest, HTTPRequestConfiguration


class MockHTTPClient(HTTPClient):
    """Implementation of :py:class:`..interfaces.http.HTTPClient` solely for testing.

    Simulates HTTP request/response behavior. Responses are queued in FIFO order and
    requests are captured for inspection. A queued exception is raised instead of
    returning a response.
    """

    def __init__(self, *, delay: float = 0) -> None:
        """
        :param delay: Seconds to sleep before answering each request, which lets tests
            overlap concurrent calls.
        """
        self._delay = delay
        self._response_queue: deque[dict[str, Any] | Exception] = deque()
        self._captured_requests: list[HTTPRequest] = []

    def add_response(
        self,
        status: int = 200,
        headers: list[tuple[str, str]] | None = None,
        body: bytes = b"",
    ) -> None:
        """Queue a response for the next request.

        :param status: HTTP status code.
        :param headers: HTTP response headers as list of (name, value) tuples.
        :param body: Response body as bytes.
        """
        self._response_queue.append(
            {
                "status": status,
                "headers": headers or [],
                "body": body,
            }
        )

    def add_error(self, error: Exception) -> None:
        """Queue an exception to be raised by the next request."""
        self._response_queue.append(error)

    async def send(
        self,
        request: HTTPRequest,
        *,
        request_config: HTTPRequestConfiguration | None = None,
    ) -> HTTPResponse:
        """Send HTTP request and return configured response.

        :raises MockHTTPClientError: If no responses are queued.
        """
        self._captured_requests.append(copy(request))
        if not self._response_queue:
            raise MockHTTPClientError(
                "No responses queued in MockHTTPClient. Use add_response() to queue "
                "responses."
            )

        response_data = self._response_queue.popleft()
        if self._delay:
            await asyncio.sleep(self._delay)
        if isinstance(response_data, Exception):
            raise response_data
        return HTTPResponse(
            status=response_data["status"],
            fields=tuples_to_fields(response_data["headers"]),
            body=response_data["body"],
            reason=None,
        )

    @property
    def call_count(self) -> int:
        """The number of requests made to this client."""
        return len(self._captured_requests)

    @property
    def captured_requests(self) -> list[HTTPRequest]:
        """The list of all requests captured by this client."""
        return self._captured_requests.copy()

    def __deepcopy__(self, memo: Any) -> "MockHTTPClient":
        return self


class MockHTTPClientError(Exception):
    """Exception raised by MockHTTPClient for test setup issues."""
