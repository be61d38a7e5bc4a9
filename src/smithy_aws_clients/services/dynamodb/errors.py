#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Final

from ...exceptions import ServiceError
from .models import AttributeMap, CancellationReason


@dataclass(kw_only=True)
class DynamoDBError(ServiceError):
    """Base class of the modeled DynamoDB errors."""


@dataclass(kw_only=True)
class InvalidEndpointException(DynamoDBError):
    """The endpoint the request was sent to is no longer valid.

    Raised for requests sent to a discovered endpoint that has since moved. The
    client drops the cached endpoint before raising this error.
    """


@dataclass(kw_only=True)
class ResourceNotFoundException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class ResourceInUseException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class ConditionalCheckFailedException(DynamoDBError):
    item: AttributeMap | None = None
    """The item, when ``ReturnValuesOnConditionCheckFailure`` is ``ALL_OLD``."""


@dataclass(kw_only=True)
class ProvisionedThroughputExceededException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class RequestLimitExceeded(DynamoDBError):
    pass


@dataclass(kw_only=True)
class LimitExceededException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class ItemCollectionSizeLimitExceededException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class TransactionCanceledException(DynamoDBError):
    cancellation_reasons: list[CancellationReason] | None = None
    """One reason per item of the transaction, in request order."""


@dataclass(kw_only=True)
class TransactionConflictException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class TransactionInProgressException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class IdempotentParameterMismatchException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class DuplicateItemException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class InternalServerError(DynamoDBError):
    pass


@dataclass(kw_only=True)
class BackupNotFoundException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class BackupInUseException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class ContinuousBackupsUnavailableException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class PointInTimeRecoveryUnavailableException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class InvalidRestoreTimeException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class TableNotFoundException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class TableInUseException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class TableAlreadyExistsException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class GlobalTableNotFoundException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class GlobalTableAlreadyExistsException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class ReplicaNotFoundException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class ReplicaAlreadyExistsException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class IndexNotFoundException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class ExportNotFoundException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class ExportConflictException(DynamoDBError):
    pass


@dataclass(kw_only=True)
class InvalidExportTimeException(DynamoDBError):
    pass


ERRORS: Final[dict[str, type[ServiceError]]] = {
    error.__name__: error
    for error in (
        InvalidEndpointException,
        ResourceNotFoundException,
        ResourceInUseException,
        ConditionalCheckFailedException,
        ProvisionedThroughputExceededException,
        RequestLimitExceeded,
        LimitExceededException,
        ItemCollectionSizeLimitExceededException,
        TransactionCanceledException,
        TransactionConflictException,
        TransactionInProgressException,
        IdempotentParameterMismatchException,
        DuplicateItemException,
        InternalServerError,
        BackupNotFoundException,
        BackupInUseException,
        ContinuousBackupsUnavailableException,
        PointInTimeRecoveryUnavailableException,
        InvalidRestoreTimeException,
        TableNotFoundException,
        TableInUseException,
        TableAlreadyExistsException,
        GlobalTableNotFoundException,
        GlobalTableAlreadyExistsException,
        ReplicaNotFoundException,
        ReplicaAlreadyExistsException,
        IndexNotFoundException,
        ExportNotFoundException,
        ExportConflictException,
        InvalidExportTimeException,
    )
}
"""Modeled errors keyed by the error code the service sends."""
