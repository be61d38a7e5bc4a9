#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Any, Final

from ...exceptions import ServiceError


@dataclass(kw_only=True)
class NetworkManagerError(ServiceError):
    """Base class of the modeled AWS Network Manager errors."""


@dataclass(kw_only=True)
class ValidationException(NetworkManagerError):
    reason: str | None = None
    fields: list[dict[str, Any]] | None = None


@dataclass(kw_only=True)
class ResourceNotFoundException(NetworkManagerError):
    resource_id: str | None = None
    resource_type: str | None = None
    context: dict[str, str] | None = None


@dataclass(kw_only=True)
class ConflictException(NetworkManagerError):
    resource_id: str | None = None
    resource_type: str | None = None


@dataclass(kw_only=True)
class ServiceQuotaExceededException(NetworkManagerError):
    resource_id: str | None = None
    resource_type: str | None = None
    limit_code: str | None = None
    service_code: str | None = None


@dataclass(kw_only=True)
class AccessDeniedException(NetworkManagerError):
    pass


@dataclass(kw_only=True)
class InternalServerException(NetworkManagerError):
    pass


@dataclass(kw_only=True)
class ThrottlingException(NetworkManagerError):
    pass


ERRORS: Final[dict[str, type[ServiceError]]] = {
    error.__name__: error
    for error in (
        ValidationException,
        ResourceNotFoundException,
        ConflictException,
        ServiceQuotaExceededException,
        AccessDeniedException,
        InternalServerException,
        ThrottlingException,
    )
}
