#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Final

from ...exceptions import ServiceError


@dataclass(kw_only=True)
class ComprehendError(ServiceError):
    """Base class of the modeled Amazon Comprehend errors."""


@dataclass(kw_only=True)
class InvalidRequestException(ComprehendError):
    reason: str | None = None
    detail: dict[str, str] | None = None


@dataclass(kw_only=True)
class TextSizeLimitExceededException(ComprehendError):
    pass


@dataclass(kw_only=True)
class UnsupportedLanguageException(ComprehendError):
    pass


@dataclass(kw_only=True)
class BatchSizeLimitExceededException(ComprehendError):
    pass


@dataclass(kw_only=True)
class InternalServerException(ComprehendError):
    pass


@dataclass(kw_only=True)
class InvalidFilterException(ComprehendError):
    pass


@dataclass(kw_only=True)
class ResourceNotFoundException(ComprehendError):
    pass


@dataclass(kw_only=True)
class ResourceUnavailableException(ComprehendError):
    pass


@dataclass(kw_only=True)
class ConcurrentModificationException(ComprehendError):
    pass


@dataclass(kw_only=True)
class TooManyRequestsException(ComprehendError):
    pass


@dataclass(kw_only=True)
class TooManyTagsException(ComprehendError):
    pass


@dataclass(kw_only=True)
class TooManyTagKeysException(ComprehendError):
    pass


ERRORS: Final[dict[str, type[ServiceError]]] = {
    error.__name__: error
    for error in (
        InvalidRequestException,
        TextSizeLimitExceededException,
        UnsupportedLanguageException,
        BatchSizeLimitExceededException,
        InternalServerException,
        InvalidFilterException,
        ResourceNotFoundException,
        ResourceUnavailableException,
        ConcurrentModificationException,
        TooManyRequestsException,
        TooManyTagsException,
        TooManyTagKeysException,
    )
}
