#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import asyncio
import logging
from collections.abc import Callable, Coroutine, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Self

from . import URI
from .auth import AnonymousSigner, SigV4Signer
from .config import Config
from .endpoints import EndpointResolverParams, StandardRegionalEndpointsResolver
from .exceptions import SmithyError
from .identity import AWSCredentialsResolver, AWSIdentityProperties
from .interfaces import EndpointResolver, TypedProperties
from .interfaces.auth import Signer
from .interfaces.http import HTTPClient, HTTPRequestConfiguration
from .operations import AuthType, OperationSpec
from .protocols import ClientProtocol
from .types import TypedProperties as _TypedProperties

_UNRESOLVED = URI(host="localhost", path="/")

_LOGGER = logging.getLogger(__name__)


@dataclass(kw_only=True, frozen=True)
class ClientCall[I, O]:
    """A data class containing all the initial information about an operation
    invocation."""

    input: I
    """The input of the operation."""

    operation: OperationSpec[I, O] = field(repr=False)
    """The description of the operation."""

    context: TypedProperties
    """The initial context of the operation."""

    endpoint_resolver: EndpointResolver
    """The endpoint resolver for the operation."""

    signer: Signer[Any, Any]
    """The signer for the operation."""

    identity_resolver: AWSCredentialsResolver | None = None
    """The identity resolver for the operation, or None for unsigned operations."""

    identity_properties: AWSIdentityProperties = field(
        default_factory=AWSIdentityProperties
    )
    signer_properties: Mapping[str, Any] = field(default_factory=dict)

    request_config: HTTPRequestConfiguration | None = None
    """Configuration specific to the HTTP request."""


class RequestPipeline:
    """Invokes client operations asynchronously."""

    protocol: ClientProtocol
    """The protocol to use to serialize the request and deserialize the response."""

    transport: HTTPClient
    """The transport to use to send the request and receive the response."""

    def __init__(self, protocol: ClientProtocol, transport: HTTPClient) -> None:
        self.protocol = protocol
        self.transport = transport

    async def __call__[I, O](self, call: ClientCall[I, O], /) -> O:
        """Invoke an operation asynchronously.

        Exceptions that aren't a :py:class:`SmithyError` are wrapped in one.

        :param call: The operation to invoke and associated context.
        """
        _LOGGER.debug(
            'Making request for operation "%s" with parameters: %s',
            call.operation.name,
            call.input,
        )
        try:
            return await self._handle_execution(call)
        except SmithyError:
            raise
        except Exception as e:
            raise SmithyError(e) from e

    async def _handle_execution[I, O](self, call: ClientCall[I, O]) -> O:
        call.operation.validate(call.input)

        _LOGGER.debug("Serializing request for: %s", call.input)
        request = self.protocol.serialize_request(
            operation=call.operation, input=call.input, endpoint=_UNRESOLVED
        )
        _LOGGER.debug("Serialization complete. Transport request: %s", request)

        endpoint_params = EndpointResolverParams(
            operation=call.operation, input=call.input, context=call.context
        )
        _LOGGER.debug("Calling endpoint resolver with params: %s", endpoint_params)
        endpoint = await call.endpoint_resolver.resolve_endpoint(endpoint_params)
        _LOGGER.debug("Endpoint resolver result: %s", endpoint)
        request = self.protocol.set_service_endpoint(request=request, endpoint=endpoint)

        identity = None
        if call.identity_resolver is not None:
            identity = await call.identity_resolver.get_identity(
                properties=call.identity_properties
            )
        _LOGGER.debug("Request to sign: %s", request)
        _LOGGER.debug("Signer properties: %s", call.signer_properties)
        request = await call.signer.sign(
            request=request, identity=identity, properties=call.signer_properties
        )

        _LOGGER.debug("Sending request %s", request)
        response = await self.transport.send(
            request, request_config=call.request_config
        )
        _LOGGER.debug("Received response: %s", response)

        output = await self.protocol.deserialize_response(
            operation=call.operation, request=request, response=response
        )
        _LOGGER.debug("Deserialization complete. Output: %s", output)
        return output


class ServiceClient:
    """Base class of the service clients.

    Each operation is a coroutine. To run one in the background, pass it to
    :py:meth:`submit`, which returns an ``asyncio.Task`` and optionally attaches a
    completion callback.
    """

    endpoint_prefix: ClassVar[str]
    """The prefix of the service's regional hostnames."""

    signing_name: ClassVar[str]
    """The service name used in SigV4 signatures."""

    def __init__(self, config: Config | None = None) -> None:
        """Constructor for the client.

        :param config: Configuration for the client. It is resolved on the first
            operation call.
        """
        self._config = config or Config()
        self._config_lock = asyncio.Lock()
        self._protocol = self._create_protocol()
        self._endpoint_resolver: EndpointResolver | None = None
        self._sigv4_signer = SigV4Signer()
        self._anonymous_signer = AnonymousSigner()

    @property
    def config(self) -> Config:
        return self._config

    def _create_protocol(self) -> ClientProtocol:
        raise NotImplementedError()

    def _create_endpoint_resolver(self, config: Config) -> EndpointResolver:
        if config.endpoint_resolver is not None:
            return config.endpoint_resolver
        return StandardRegionalEndpointsResolver(self.endpoint_prefix)

    async def _resolve_config(self) -> Config:
        if not self._config.is_resolved:
            async with self._config_lock:
                if not self._config.is_resolved:
                    await self._config.resolve()
        if self._endpoint_resolver is None:
            self._endpoint_resolver = self._create_endpoint_resolver(self._config)
        return self._config

    async def _execute_operation[I, O](
        self,
        input: I,
        operation: OperationSpec[I, O],
        context: TypedProperties | None = None,
    ) -> O:
        config = await self._resolve_config()
        if context is None:
            context = _TypedProperties()
        context["config"] = config

        if operation.auth is AuthType.ANONYMOUS:
            signer: Signer[Any, Any] = self._anonymous_signer
            identity_resolver = None
        else:
            signer = self._sigv4_signer
            identity_resolver = config.aws_credentials_identity_resolver

        call = ClientCall(
            input=input,
            operation=operation,
            context=context,
            endpoint_resolver=self._endpoint_resolver,  # type: ignore[arg-type]
            signer=signer,
            identity_resolver=identity_resolver,
            identity_properties={
                "access_key_id": config.aws_access_key_id,
                "secret_access_key": config.aws_secret_access_key,
                "session_token": config.aws_session_token,
            },
            signer_properties={
                "region": config.region,
                "service": self.signing_name,
            },
            request_config=config.http_request_config,
        )
        pipeline = RequestPipeline(protocol=self._protocol, transport=config.transport)
        return await pipeline(call)

    def submit[O](
        self,
        operation: Coroutine[Any, Any, O],
        callback: Callable[["asyncio.Task[O]"], object] | None = None,
    ) -> "asyncio.Task[O]":
        """Run an operation call in the background.

        .. code-block:: python

            task = client.submit(client.list_tables(ListTablesInput()))
            output = await task

        :param operation: The operation call, for example
            ``client.get_item(GetItemInput(...))``.
        :param callback: Called with the finished task once the operation completes.
        :returns: The task running the operation.
        """
        task = asyncio.create_task(operation)
        if callback is not None:
            task.add_done_callback(callback)
        return task

    async def close(self) -> None:
        """Close the transport, if the config was resolved and it can be closed."""
        if self._config.is_resolved:
            close = getattr(self._config.transport, "close", None)
            if close is not None:
                await close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
