#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Protocol, overload, runtime_checkable

if TYPE_CHECKING:
    from ..endpoints import EndpointResolverParams


class URI(Protocol):
    """Universal Resource Identifier, target location for a request."""

    scheme: str
    """For example ``http`` or ``https``."""

    username: str | None
    password: str | None

    host: str
    """The hostname, for example ``dynamodb.us-east-1.amazonaws.com``."""

    port: int | None
    path: str | None
    query: str | None
    fragment: str | None

    def build(self) -> str:
        """Construct URI string representation."""
        ...

    @property
    def netloc(self) -> str:
        """Construct netloc string in format ``{username}:{password}@{host}:{port}``"""
        ...


@runtime_checkable
class PropertyKey[T](Protocol):
    """A typed properties key, used with :py:class:`TypedProperties`."""

    key: str
    """The string key used to access the value."""

    value_type: type[T]
    """The type of the associated value in the properties bag."""


@runtime_checkable
class TypedProperties(Protocol):
    """A properties map with typed setters and getters.

    Keys can be either a string or a :py:class:`PropertyKey`. Using a PropertyKey lets
    type checkers narrow the value to the key's ``value_type``.
    """

    @overload
    def __getitem__[T](self, key: PropertyKey[T]) -> T: ...
    @overload
    def __getitem__(self, key: str) -> Any: ...

    @overload
    def __setitem__[T](self, key: PropertyKey[T], value: T) -> None: ...
    @overload
    def __setitem__(self, key: str, value: Any) -> None: ...

    def __delitem__(self, key: str | PropertyKey[Any]) -> None: ...

    @overload
    def get[T](self, key: PropertyKey[T], default: None = None) -> T | None: ...
    @overload
    def get[T](self, key: PropertyKey[T], default: T) -> T: ...
    @overload
    def get(self, key: str, default: Any = None) -> Any: ...

    def __iter__(self) -> Iterator[str]: ...
    def __contains__(self, key: object) -> bool: ...


class Endpoint(Protocol):
    """A resolved endpoint."""

    uri: URI
    """The endpoint URI."""

    properties: TypedProperties
    """Properties required to interact with the endpoint."""


class EndpointResolver(Protocol):
    """Resolves an operation's endpoint based on the given parameters."""

    async def resolve_endpoint(self, params: "EndpointResolverParams[Any]") -> Endpoint:
        """Resolve an endpoint for the given operation.

        :param params: The parameters available to resolve the endpoint.
        """
        ...
