#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final

from .documents import wire_name
from .exceptions import MissingParameterError
from .types import PathPattern

logger: Final = logging.getLogger(__name__)


class DiscoveryMode(Enum):
    """How an operation uses endpoint discovery."""

    NONE = "none"
    """The operation is always sent to the statically resolved endpoint."""

    OPTIONAL = "optional"
    """The operation uses a discovered endpoint when discovery is enabled.

    Discovery failures fall back to the statically resolved endpoint.
    """


class AuthType(Enum):
    """How an operation's requests are authenticated."""

    SIGV4 = "sigv4"
    """Requests are signed with AWS Signature Version 4."""

    ANONYMOUS = "anonymous"
    """Requests are sent unsigned."""


@dataclass(kw_only=True, frozen=True)
class HTTPBinding:
    """The HTTP method, path and query bindings of a REST operation.

    Path labels are named after the input member they are filled from, for example
    ``/global-networks/{global_network_id}/sites``.
    """

    method: str
    path: PathPattern
    query: Mapping[str, str] = field(default_factory=dict)
    """Maps input member names to the query string key they're sent under."""

    @property
    def bound_members(self) -> set[str]:
        """The input members sent in the path or query instead of the body."""
        return set(self.path.labels) | set(self.query)


@dataclass(kw_only=True, frozen=True)
class OperationSpec[I, O]:
    """The static description of a single service operation."""

    name: str
    """The operation name as sent on the wire, for example ``GetItem``."""

    input: type[I]
    output: type[O]

    required: tuple[str, ...] = ()
    """Names of the input members that must be set before a request is made."""

    discovery: DiscoveryMode = DiscoveryMode.NONE
    auth: AuthType = AuthType.SIGV4

    http: HTTPBinding | None = None
    """REST bindings; RPC protocols leave this unset."""

    def validate(self, input: I) -> None:
        """Check that every required member of the input is set.

        :raises MissingParameterError: naming the first missing member.
        """
        for member in self.required:
            if getattr(input, member) is None:
                name = wire_name(self.input, member)
                message = f"Missing required field [{name}]"
                logger.error("%s: %s", self.name, message)
                raise MissingParameterError(message, member_name=name)

    def __repr__(self) -> str:
        return f"OperationSpec(name={self.name!r})"


type AnyOperation = OperationSpec[Any, Any]
