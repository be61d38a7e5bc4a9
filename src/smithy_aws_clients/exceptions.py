#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from typing import Literal


class SmithyError(Exception):
    """Base exception type for all exceptions raised by smithy-aws-clients."""


type Fault = Literal["client", "server"] | None
"""Whether the client or server is at fault.

If None, then there was not enough information to determine fault.
"""


@dataclass(kw_only=True)
class CallError(SmithyError):
    """Base exception to be used in application-level errors."""

    fault: Fault = None
    """Whether the client or server is at fault.

    If None, then there was not enough information to determine fault.
    """

    message: str = field(default="", kw_only=False)
    """The message of the error."""

    is_retry_safe: bool | None = None
    """Whether the exception is safe to retry.

    A value of True does not mean a retry will occur, but rather that a retry is allowed
    to occur.

    A value of None indicates that there is not enough information available to
    determine if a retry is safe.
    """

    is_throttling_error: bool = False
    """Whether the error is a throttling error."""

    def __post_init__(self):
        super().__init__(self.message)


@dataclass(kw_only=True)
class MissingParameterError(CallError):
    """A required member of an operation input was not set.

    Raised before any endpoint resolution or network I/O takes place.
    """

    fault: Fault = "client"
    is_retry_safe: bool | None = False

    member_name: str = ""
    """The wire name of the missing member, for example ``TableName``."""


@dataclass(kw_only=True)
class ServiceError(CallError):
    """An error returned by a service in response to a request.

    Services subclass this for each modeled error. Errors with codes that aren't
    modeled are raised as a plain ``ServiceError``.
    """

    code: str = ""
    """The error code sent by the service, for example ``ResourceNotFoundException``."""

    status: int = 0
    """The HTTP status code of the response."""

    request_id: str | None = None
    """The request id the service assigned to the failed request, if any."""


class SerializationError(SmithyError):
    """Base exception type for exceptions raised during serialization."""


class SmithyIdentityError(SmithyError):
    """Base exception type for all exceptions raised in identity resolution."""


class EndpointResolutionError(SmithyError):
    """Exception type for all exceptions raised by endpoint resolution."""


class ConfigError(SmithyError):
    """Exception raised when a configuration value is invalid."""
