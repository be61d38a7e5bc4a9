#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import json
from typing import Any

from .mockhttp import MockHTTPClient


def json_response(
    client: MockHTTPClient,
    body: dict[str, Any],
    *,
    status: int = 200,
    headers: list[tuple[str, str]] | None = None,
) -> None:
    """Queue a JSON response on a mock client.

    :param client: The mock client to queue the response on.
    :param body: The JSON document to send back.
    :param status: HTTP status code.
    :param headers: Additional headers to send back.
    """
    client.add_response(
        status=status,
        headers=[("Content-Type", "application/json"), *(headers or [])],
        body=json.dumps(body).encode("utf-8"),
    )
