#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import json
import logging
import os
from collections.abc import Mapping
from dataclasses import fields
from datetime import datetime
from typing import Any, Final, Protocol

from . import URI as _URI
from .documents import deserialize, deserialize_members, serialize, wire_name
from .exceptions import SerializationError, ServiceError
from .http import Field, Fields, HTTPRequest
from .http.utils import join_query_params, quote_label
from .interfaces import URI, Endpoint
from .interfaces.http import HTTPResponse
from .operations import AnyOperation, OperationSpec
from .utils import serialize_epoch_seconds

logger: Final = logging.getLogger(__name__)

THROTTLING_CODES: Final = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "ThrottledException",
        "RequestThrottledException",
        "TooManyRequestsException",
        "ProvisionedThroughputExceededException",
        "RequestLimitExceeded",
        "LimitExceededException",
    }
)

_SERVICE_ERROR_MEMBERS: Final = frozenset(f.name for f in fields(ServiceError))


def parse_error_code(code: str) -> str | None:
    """Strip the namespace and any trailing URI from an error code.

    ``aws.dynamodb#ResourceNotFoundException:http://internal`` becomes
    ``ResourceNotFoundException``.
    """
    code = code.split(":")[0].split("#")[-1].strip()
    return code or None


class ClientProtocol(Protocol):
    """Serializes requests for, and deserializes responses from, a service."""

    def serialize_request[I](
        self, *, operation: OperationSpec[I, Any], input: I, endpoint: URI
    ) -> HTTPRequest:
        """Serialize an operation input into a request for the given endpoint."""
        ...

    def set_service_endpoint(
        self, *, request: HTTPRequest, endpoint: Endpoint
    ) -> HTTPRequest:
        """Update a serialized request to be sent to a resolved endpoint."""
        ...

    async def deserialize_response[O](
        self,
        *,
        operation: OperationSpec[Any, O],
        request: HTTPRequest,
        response: HTTPResponse,
    ) -> O:
        """Deserialize a response into the operation's output, or raise its error."""
        ...


class HttpClientProtocol(ClientProtocol):
    """An HTTP-based protocol whose payloads are JSON documents."""

    content_type: str = "application/json"

    def __init__(
        self, *, errors: Mapping[str, type[ServiceError]] | None = None
    ) -> None:
        """
        :param errors: Modeled errors of the service, keyed by error code.
        """
        self._errors: Mapping[str, type[ServiceError]] = errors or {}

    def set_service_endpoint(
        self,
        *,
        request: HTTPRequest,
        endpoint: Endpoint,
    ) -> HTTPRequest:
        uri = endpoint.uri
        previous = request.destination

        path = previous.path or uri.path
        if uri.path is not None and previous.path is not None:
            path = os.path.join(uri.path, previous.path.lstrip("/"))

        if path is not None and not path.startswith("/"):
            path = "/" + path

        query = previous.query or uri.query
        if uri.query and previous.query:
            query = f"{uri.query}&{previous.query}"

        request.destination = _URI(
            scheme=uri.scheme,
            username=uri.username or previous.username,
            password=uri.password or previous.password,
            host=uri.host,
            port=uri.port or previous.port,
            path=path,
            query=query,
            fragment=uri.fragment or previous.fragment,
        )
        request.fields.set_field(Field(name="Host", values=[uri.netloc]))
        return request

    async def deserialize_response[O](
        self,
        *,
        operation: OperationSpec[Any, O],
        request: HTTPRequest,
        response: HTTPResponse,
    ) -> O:
        body = await response.consume_body_async()
        if not 200 <= response.status < 300:
            raise self._create_error(
                operation=operation, response=response, response_body=body
            )

        return deserialize(operation.output, self._parse_body(body))

    def _parse_body(self, body: bytes) -> dict[str, Any]:
        if not body.strip():
            return {}
        try:
            document = json.loads(body)
        except ValueError as e:
            raise SerializationError(f"Unable to parse response body: {e}") from e
        if not isinstance(document, dict):
            raise SerializationError(
                f"Expected a JSON object in the response body, found {type(document)}"
            )
        return document

    def _create_error(
        self,
        *,
        operation: AnyOperation,
        response: HTTPResponse,
        response_body: bytes,
    ) -> ServiceError:
        try:
            document = self._parse_body(response_body)
        except SerializationError:
            document = {}

        code: str | None = None
        if (header := response.fields.get("x-amzn-errortype")) is not None:
            code = parse_error_code(header.as_string())
        if code is None:
            raw_code = document.get("__type") or document.get("code")
            if isinstance(raw_code, str):
                code = parse_error_code(raw_code)

        message = document.get("message") or document.get("Message")
        if not isinstance(message, str):
            message = (
                f"Unknown error for operation {operation.name} "
                f"- status: {response.status}"
            )
            if response.reason is not None:
                message += f" - reason: {response.reason}"

        request_id = None
        if (request_id_field := response.fields.get("x-amzn-requestid")) is not None:
            request_id = request_id_field.as_string()

        is_throttle = response.status == 429 or code in THROTTLING_CODES
        error_type = self._errors.get(code, ServiceError) if code else ServiceError
        extra = deserialize_members(error_type, document, skip=_SERVICE_ERROR_MEMBERS)

        logger.debug(
            "%s failed with status %s and error code %s",
            operation.name,
            response.status,
            code,
        )
        return error_type(
            message,
            code=code or "",
            status=response.status,
            request_id=request_id,
            fault="client" if response.status < 500 else "server",
            is_throttling_error=is_throttle,
            is_retry_safe=is_throttle or None,
            **extra,
        )


class AWSJSONClientProtocol(HttpClientProtocol):
    """An implementation of the aws.protocols#awsJson1_0 and awsJson1_1 protocols.

    Every operation is a ``POST`` to ``/`` whose ``X-Amz-Target`` header names the
    operation.
    """

    def __init__(
        self,
        *,
        target_prefix: str,
        json_version: str = "1.0",
        errors: Mapping[str, type[ServiceError]] | None = None,
    ) -> None:
        """
        :param target_prefix: The prefix of the target header, for example
            ``DynamoDB_20120810``.
        :param json_version: ``1.0`` or ``1.1``.
        :param errors: Modeled errors of the service, keyed by error code.
        """
        super().__init__(errors=errors)
        self._target_prefix = target_prefix
        self.content_type = f"application/x-amz-json-{json_version}"

    def serialize_request[I](
        self, *, operation: OperationSpec[I, Any], input: I, endpoint: URI
    ) -> HTTPRequest:
        body = json.dumps(serialize(input)).encode("utf-8")
        return HTTPRequest(
            destination=endpoint,
            method="POST",
            fields=Fields(
                [
                    Field(name="Content-Type", values=[self.content_type]),
                    Field(
                        name="X-Amz-Target",
                        values=[f"{self._target_prefix}.{operation.name}"],
                    ),
                    Field(name="Content-Length", values=[str(len(body))]),
                ]
            ),
            body=body,
        )


class RestJSONClientProtocol(HttpClientProtocol):
    """An implementation of the aws.protocols#restJson1 protocol.

    Members bound to path labels and query parameters are sent there. The remaining
    members form the JSON body of requests that have one.
    """

    def serialize_request[I](
        self, *, operation: OperationSpec[I, Any], input: I, endpoint: URI
    ) -> HTTPRequest:
        binding = operation.http
        if binding is None:
            raise SerializationError(
                f"Operation {operation.name} has no HTTP bindings."
            )

        labels: dict[str, str] = {}
        for member in binding.path.labels:
            value = getattr(input, member)
            if value is None:
                raise SerializationError(
                    f"Path label {member} of {operation.name} must be set."
                )
            labels[member] = quote_label(
                _query_string_value(value), member in binding.path.greedy_labels
            )
        path = binding.path.format(**labels)

        params: list[tuple[str, str | None]] = []
        for member, key in binding.query.items():
            value = getattr(input, member)
            if value is None:
                continue
            values = value if isinstance(value, list | tuple) else [value]
            params.extend((key, _query_string_value(item)) for item in values)

        document = serialize(input)
        for member in binding.bound_members:
            document.pop(wire_name(operation.input, member), None)

        request_fields = Fields()
        body = b""
        if binding.method not in ("GET", "HEAD") and (
            document or binding.method in ("POST", "PUT", "PATCH")
        ):
            body = json.dumps(document).encode("utf-8")
            request_fields.set_field(
                Field(name="Content-Type", values=[self.content_type])
            )
            request_fields.set_field(
                Field(name="Content-Length", values=[str(len(body))])
            )

        return HTTPRequest(
            destination=_URI(
                scheme=endpoint.scheme,
                host=endpoint.host,
                port=endpoint.port,
                path=path,
                query=join_query_params(params) or None,
            ),
            method=binding.method,
            fields=request_fields,
            body=body,
        )


def _query_string_value(value: Any) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case datetime():
            return str(serialize_epoch_seconds(value))
        case _:
            return str(value)
