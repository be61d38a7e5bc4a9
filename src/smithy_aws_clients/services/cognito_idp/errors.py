#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Final

from ...exceptions import ServiceError


@dataclass(kw_only=True)
class CognitoIdentityProviderError(ServiceError):
    """Base class of the modeled Amazon Cognito user pools errors."""


@dataclass(kw_only=True)
class NotAuthorizedException(CognitoIdentityProviderError):
    """Incorrect credentials, or the operation isn't allowed for the user."""


@dataclass(kw_only=True)
class UserNotFoundException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class UserNotConfirmedException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class UsernameExistsException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class InvalidPasswordException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class InvalidParameterException(CognitoIdentityProviderError):
    reason_code: str | None = None


@dataclass(kw_only=True)
class CodeMismatchException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class ExpiredCodeException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class PasswordResetRequiredException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class ResourceNotFoundException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class TooManyRequestsException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class TooManyFailedAttemptsException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class LimitExceededException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class CodeDeliveryFailureException(CognitoIdentityProviderError):
    pass


@dataclass(kw_only=True)
class InternalErrorException(CognitoIdentityProviderError):
    pass


ERRORS: Final[dict[str, type[ServiceError]]] = {
    error.__name__: error
    for error in (
        NotAuthorizedException,
        UserNotFoundException,
        UserNotConfirmedException,
        UsernameExistsException,
        InvalidPasswordException,
        InvalidParameterException,
        CodeMismatchException,
        ExpiredCodeException,
        PasswordResetRequiredException,
        ResourceNotFoundException,
        TooManyRequestsException,
        TooManyFailedAttemptsException,
        LimitExceededException,
        CodeDeliveryFailureException,
        InternalErrorException,
    )
}
