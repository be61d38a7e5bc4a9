#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
"""Input, output and structure shapes of Amazon DynamoDB.

Attribute values are passed through in their wire form, for example
``{"S": "hello"}`` or ``{"N": "42"}``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

type AttributeValue = dict[str, Any]
type AttributeMap = dict[str, AttributeValue]
type Document = dict[str, Any]


def _named(name: str) -> Any:
    return field(default=None, metadata={"name": name})


# Structures


@dataclass(kw_only=True)
class Endpoint:
    """An endpoint returned by ``DescribeEndpoints``."""

    address: str | None = None
    """The endpoint address, in the form ``host[:port]``."""

    cache_period_in_minutes: int | None = None
    """How long the endpoint may be cached for."""


@dataclass(kw_only=True)
class AttributeDefinition:
    attribute_name: str | None = None
    attribute_type: str | None = None
    """``S``, ``N`` or ``B``."""


@dataclass(kw_only=True)
class KeySchemaElement:
    attribute_name: str | None = None
    key_type: str | None = None
    """``HASH`` or ``RANGE``."""


@dataclass(kw_only=True)
class ProvisionedThroughput:
    read_capacity_units: int | None = None
    write_capacity_units: int | None = None


@dataclass(kw_only=True)
class ProvisionedThroughputDescription:
    last_increase_date_time: datetime | None = None
    last_decrease_date_time: datetime | None = None
    number_of_decreases_today: int | None = None
    read_capacity_units: int | None = None
    write_capacity_units: int | None = None


@dataclass(kw_only=True)
class Projection:
    projection_type: str | None = None
    non_key_attributes: list[str] | None = None


@dataclass(kw_only=True)
class LocalSecondaryIndex:
    index_name: str | None = None
    key_schema: list[KeySchemaElement] | None = None
    projection: Projection | None = None


@dataclass(kw_only=True)
class GlobalSecondaryIndex:
    index_name: str | None = None
    key_schema: list[KeySchemaElement] | None = None
    projection: Projection | None = None
    provisioned_throughput: ProvisionedThroughput | None = None


@dataclass(kw_only=True)
class IndexDescription:
    """Describes a local or global secondary index of a table."""

    index_name: str | None = None
    key_schema: list[KeySchemaElement] | None = None
    projection: Projection | None = None
    index_status: str | None = None
    provisioned_throughput: ProvisionedThroughputDescription | None = None
    index_size_bytes: int | None = None
    item_count: int | None = None
    index_arn: str | None = None


@dataclass(kw_only=True)
class StreamSpecification:
    stream_enabled: bool | None = None
    stream_view_type: str | None = None


@dataclass(kw_only=True)
class SSESpecification:
    enabled: bool | None = None
    sse_type: str | None = _named("SSEType")
    kms_master_key_id: str | None = _named("KMSMasterKeyId")


@dataclass(kw_only=True)
class SSEDescription:
    status: str | None = None
    sse_type: str | None = _named("SSEType")
    kms_master_key_arn: str | None = _named("KMSMasterKeyArn")


@dataclass(kw_only=True)
class Tag:
    key: str | None = None
    value: str | None = None


@dataclass(kw_only=True)
class BillingModeSummary:
    billing_mode: str | None = None
    last_update_to_pay_per_request_date_time: datetime | None = None


@dataclass(kw_only=True)
class TableDescription:
    attribute_definitions: list[AttributeDefinition] | None = None
    table_name: str | None = None
    key_schema: list[KeySchemaElement] | None = None
    table_status: str | None = None
    creation_date_time: datetime | None = None
    provisioned_throughput: ProvisionedThroughputDescription | None = None
    table_size_bytes: int | None = None
    item_count: int | None = None
    table_arn: str | None = None
    table_id: str | None = None
    billing_mode_summary: BillingModeSummary | None = None
    local_secondary_indexes: list[IndexDescription] | None = None
    global_secondary_indexes: list[IndexDescription] | None = None
    stream_specification: StreamSpecification | None = None
    latest_stream_label: str | None = None
    latest_stream_arn: str | None = None
    global_table_version: str | None = None
    replicas: list[Document] | None = None
    restore_summary: Document | None = None
    sse_description: SSEDescription | None = _named("SSEDescription")
    table_class_summary: Document | None = None
    deletion_protection_enabled: bool | None = None


@dataclass(kw_only=True)
class Capacity:
    read_capacity_units: float | None = None
    write_capacity_units: float | None = None
    capacity_units: float | None = None


@dataclass(kw_only=True)
class ConsumedCapacity:
    table_name: str | None = None
    capacity_units: float | None = None
    read_capacity_units: float | None = None
    write_capacity_units: float | None = None
    table: Capacity | None = None
    local_secondary_indexes: dict[str, Capacity] | None = None
    global_secondary_indexes: dict[str, Capacity] | None = None


@dataclass(kw_only=True)
class ItemCollectionMetrics:
    item_collection_key: AttributeMap | None = None
    size_estimate_range_gb: list[float] | None = _named("SizeEstimateRangeGB")


@dataclass(kw_only=True)
class KeysAndAttributes:
    keys: list[AttributeMap] | None = None
    attributes_to_get: list[str] | None = None
    consistent_read: bool | None = None
    projection_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None


@dataclass(kw_only=True)
class PutRequest:
    item: AttributeMap | None = None


@dataclass(kw_only=True)
class DeleteRequest:
    key: AttributeMap | None = None


@dataclass(kw_only=True)
class WriteRequest:
    """Exactly one of ``put_request`` and ``delete_request`` is set."""

    put_request: PutRequest | None = None
    delete_request: DeleteRequest | None = None


@dataclass(kw_only=True)
class Get:
    key: AttributeMap | None = None
    table_name: str | None = None
    projection_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None


@dataclass(kw_only=True)
class TransactGetItem:
    get: Get | None = None


@dataclass(kw_only=True)
class ItemResponse:
    item: AttributeMap | None = None


@dataclass(kw_only=True)
class ConditionCheck:
    key: AttributeMap | None = None
    table_name: str | None = None
    condition_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None
    expression_attribute_values: AttributeMap | None = None
    return_values_on_condition_check_failure: str | None = None


@dataclass(kw_only=True)
class Put:
    item: AttributeMap | None = None
    table_name: str | None = None
    condition_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None
    expression_attribute_values: AttributeMap | None = None
    return_values_on_condition_check_failure: str | None = None


@dataclass(kw_only=True)
class Delete:
    key: AttributeMap | None = None
    table_name: str | None = None
    condition_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None
    expression_attribute_values: AttributeMap | None = None
    return_values_on_condition_check_failure: str | None = None


@dataclass(kw_only=True)
class Update:
    key: AttributeMap | None = None
    update_expression: str | None = None
    table_name: str | None = None
    condition_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None
    expression_attribute_values: AttributeMap | None = None
    return_values_on_condition_check_failure: str | None = None


@dataclass(kw_only=True)
class TransactWriteItem:
    """Exactly one action member is set."""

    condition_check: ConditionCheck | None = None
    put: Put | None = None
    delete: Delete | None = None
    update: Update | None = None


@dataclass(kw_only=True)
class CancellationReason:
    item: AttributeMap | None = None
    code: str | None = None
    message: str | None = None


@dataclass(kw_only=True)
class BackupDetails:
    backup_arn: str | None = None
    backup_name: str | None = None
    backup_size_bytes: int | None = None
    backup_status: str | None = None
    backup_type: str | None = None
    backup_creation_date_time: datetime | None = None
    backup_expiry_date_time: datetime | None = None


@dataclass(kw_only=True)
class BackupDescription:
    backup_details: BackupDetails | None = None
    source_table_details: Document | None = None
    source_table_feature_details: Document | None = None


@dataclass(kw_only=True)
class BackupSummary:
    table_name: str | None = None
    table_id: str | None = None
    table_arn: str | None = None
    backup_arn: str | None = None
    backup_name: str | None = None
    backup_creation_date_time: datetime | None = None
    backup_expiry_date_time: datetime | None = None
    backup_status: str | None = None
    backup_type: str | None = None
    backup_size_bytes: int | None = None


@dataclass(kw_only=True)
class PointInTimeRecoverySpecification:
    point_in_time_recovery_enabled: bool | None = None


@dataclass(kw_only=True)
class PointInTimeRecoveryDescription:
    point_in_time_recovery_status: str | None = None
    earliest_restorable_date_time: datetime | None = None
    latest_restorable_date_time: datetime | None = None


@dataclass(kw_only=True)
class ContinuousBackupsDescription:
    continuous_backups_status: str | None = None
    point_in_time_recovery_description: PointInTimeRecoveryDescription | None = None


@dataclass(kw_only=True)
class Replica:
    region_name: str | None = None


@dataclass(kw_only=True)
class ReplicaDescription:
    region_name: str | None = None
    replica_status: str | None = None
    kms_master_key_id: str | None = _named("KMSMasterKeyId")


@dataclass(kw_only=True)
class ReplicaUpdate:
    """Exactly one of ``create`` and ``delete`` is set."""

    create: Replica | None = None
    delete: Replica | None = None


@dataclass(kw_only=True)
class GlobalTable:
    global_table_name: str | None = None
    replication_group: list[Replica] | None = None


@dataclass(kw_only=True)
class GlobalTableDescription:
    replication_group: list[ReplicaDescription] | None = None
    global_table_arn: str | None = None
    creation_date_time: datetime | None = None
    global_table_status: str | None = None
    global_table_name: str | None = None


@dataclass(kw_only=True)
class TimeToLiveSpecification:
    enabled: bool | None = None
    attribute_name: str | None = None


@dataclass(kw_only=True)
class TimeToLiveDescription:
    time_to_live_status: str | None = None
    attribute_name: str | None = None


@dataclass(kw_only=True)
class KinesisDataStreamDestination:
    stream_arn: str | None = None
    destination_status: str | None = None
    destination_status_description: str | None = None


@dataclass(kw_only=True)
class BatchStatementRequest:
    statement: str | None = None
    parameters: list[AttributeValue] | None = None
    consistent_read: bool | None = None


@dataclass(kw_only=True)
class BatchStatementError:
    code: str | None = None
    message: str | None = None
    item: AttributeMap | None = None


@dataclass(kw_only=True)
class BatchStatementResponse:
    error: BatchStatementError | None = None
    table_name: str | None = None
    item: AttributeMap | None = None


@dataclass(kw_only=True)
class ParameterizedStatement:
    statement: str | None = None
    parameters: list[AttributeValue] | None = None


@dataclass(kw_only=True)
class ExportDescription:
    export_arn: str | None = None
    export_status: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    export_manifest: str | None = None
    table_arn: str | None = None
    table_id: str | None = None
    export_time: datetime | None = None
    client_token: str | None = None
    s3_bucket: str | None = None
    s3_bucket_owner: str | None = None
    s3_prefix: str | None = None
    s3_sse_algorithm: str | None = _named("S3SseAlgorithm")
    s3_sse_kms_key_id: str | None = _named("S3SseKmsKeyId")
    failure_code: str | None = None
    failure_message: str | None = None
    export_format: str | None = None
    billed_size_bytes: int | None = None
    item_count: int | None = None


@dataclass(kw_only=True)
class ExportSummary:
    export_arn: str | None = None
    export_status: str | None = None
    export_type: str | None = None


# Endpoint discovery


@dataclass(kw_only=True)
class DescribeEndpointsInput:
    pass


@dataclass(kw_only=True)
class DescribeEndpointsOutput:
    endpoints: list[Endpoint] | None = None


# Items


@dataclass(kw_only=True)
class GetItemInput:
    table_name: str | None = None
    key: AttributeMap | None = None
    attributes_to_get: list[str] | None = None
    consistent_read: bool | None = None
    return_consumed_capacity: str | None = None
    projection_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None


@dataclass(kw_only=True)
class GetItemOutput:
    item: AttributeMap | None = None
    consumed_capacity: ConsumedCapacity | None = None


@dataclass(kw_only=True)
class PutItemInput:
    table_name: str | None = None
    item: AttributeMap | None = None
    return_values: str | None = None
    return_consumed_capacity: str | None = None
    return_item_collection_metrics: str | None = None
    condition_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None
    expression_attribute_values: AttributeMap | None = None
    return_values_on_condition_check_failure: str | None = None


@dataclass(kw_only=True)
class PutItemOutput:
    attributes: AttributeMap | None = None
    consumed_capacity: ConsumedCapacity | None = None
    item_collection_metrics: ItemCollectionMetrics | None = None


@dataclass(kw_only=True)
class UpdateItemInput:
    table_name: str | None = None
    key: AttributeMap | None = None
    return_values: str | None = None
    return_consumed_capacity: str | None = None
    return_item_collection_metrics: str | None = None
    update_expression: str | None = None
    condition_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None
    expression_attribute_values: AttributeMap | None = None
    return_values_on_condition_check_failure: str | None = None


@dataclass(kw_only=True)
class UpdateItemOutput:
    attributes: AttributeMap | None = None
    consumed_capacity: ConsumedCapacity | None = None
    item_collection_metrics: ItemCollectionMetrics | None = None


@dataclass(kw_only=True)
class DeleteItemInput:
    table_name: str | None = None
    key: AttributeMap | None = None
    return_values: str | None = None
    return_consumed_capacity: str | None = None
    return_item_collection_metrics: str | None = None
    condition_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None
    expression_attribute_values: AttributeMap | None = None
    return_values_on_condition_check_failure: str | None = None


@dataclass(kw_only=True)
class DeleteItemOutput:
    attributes: AttributeMap | None = None
    consumed_capacity: ConsumedCapacity | None = None
    item_collection_metrics: ItemCollectionMetrics | None = None


@dataclass(kw_only=True)
class QueryInput:
    table_name: str | None = None
    index_name: str | None = None
    select: str | None = None
    limit: int | None = None
    consistent_read: bool | None = None
    scan_index_forward: bool | None = None
    exclusive_start_key: AttributeMap | None = None
    return_consumed_capacity: str | None = None
    projection_expression: str | None = None
    filter_expression: str | None = None
    key_condition_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None
    expression_attribute_values: AttributeMap | None = None


@dataclass(kw_only=True)
class QueryOutput:
    items: list[AttributeMap] | None = None
    count: int | None = None
    scanned_count: int | None = None
    last_evaluated_key: AttributeMap | None = None
    consumed_capacity: ConsumedCapacity | None = None


@dataclass(kw_only=True)
class ScanInput:
    table_name: str | None = None
    index_name: str | None = None
    limit: int | None = None
    select: str | None = None
    exclusive_start_key: AttributeMap | None = None
    return_consumed_capacity: str | None = None
    total_segments: int | None = None
    segment: int | None = None
    projection_expression: str | None = None
    filter_expression: str | None = None
    expression_attribute_names: dict[str, str] | None = None
    expression_attribute_values: AttributeMap | None = None
    consistent_read: bool | None = None


@dataclass(kw_only=True)
class ScanOutput:
    items: list[AttributeMap] | None = None
    count: int | None = None
    scanned_count: int | None = None
    last_evaluated_key: AttributeMap | None = None
    consumed_capacity: ConsumedCapacity | None = None


@dataclass(kw_only=True)
class BatchGetItemInput:
    request_items: dict[str, KeysAndAttributes] | None = None
    return_consumed_capacity: str | None = None


@dataclass(kw_only=True)
class BatchGetItemOutput:
    responses: dict[str, list[AttributeMap]] | None = None
    unprocessed_keys: dict[str, KeysAndAttributes] | None = None
    consumed_capacity: list[ConsumedCapacity] | None = None


@dataclass(kw_only=True)
class BatchWriteItemInput:
    request_items: dict[str, list[WriteRequest]] | None = None
    return_consumed_capacity: str | None = None
    return_item_collection_metrics: str | None = None


@dataclass(kw_only=True)
class BatchWriteItemOutput:
    unprocessed_items: dict[str, list[WriteRequest]] | None = None
    item_collection_metrics: dict[str, list[ItemCollectionMetrics]] | None = None
    consumed_capacity: list[ConsumedCapacity] | None = None


@dataclass(kw_only=True)
class TransactGetItemsInput:
    transact_items: list[TransactGetItem] | None = None
    return_consumed_capacity: str | None = None


@dataclass(kw_only=True)
class TransactGetItemsOutput:
    consumed_capacity: list[ConsumedCapacity] | None = None
    responses: list[ItemResponse] | None = None


@dataclass(kw_only=True)
class TransactWriteItemsInput:
    transact_items: list[TransactWriteItem] | None = None
    return_consumed_capacity: str | None = None
    return_item_collection_metrics: str | None = None
    client_request_token: str | None = None


@dataclass(kw_only=True)
class TransactWriteItemsOutput:
    consumed_capacity: list[ConsumedCapacity] | None = None
    item_collection_metrics: dict[str, list[ItemCollectionMetrics]] | None = None


# PartiQL


@dataclass(kw_only=True)
class ExecuteStatementInput:
    statement: str | None = None
    parameters: list[AttributeValue] | None = None
    consistent_read: bool | None = None
    next_token: str | None = None
    return_consumed_capacity: str | None = None
    limit: int | None = None


@dataclass(kw_only=True)
class ExecuteStatementOutput:
    items: list[AttributeMap] | None = None
    next_token: str | None = None
    consumed_capacity: ConsumedCapacity | None = None
    last_evaluated_key: AttributeMap | None = None


@dataclass(kw_only=True)
class BatchExecuteStatementInput:
    statements: list[BatchStatementRequest] | None = None
    return_consumed_capacity: str | None = None


@dataclass(kw_only=True)
class BatchExecuteStatementOutput:
    responses: list[BatchStatementResponse] | None = None
    consumed_capacity: list[ConsumedCapacity] | None = None


@dataclass(kw_only=True)
class ExecuteTransactionInput:
    transact_statements: list[ParameterizedStatement] | None = None
    client_request_token: str | None = None
    return_consumed_capacity: str | None = None


@dataclass(kw_only=True)
class ExecuteTransactionOutput:
    responses: list[ItemResponse] | None = None
    consumed_capacity: list[ConsumedCapacity] | None = None


# Tables


@dataclass(kw_only=True)
class CreateTableInput:
    attribute_definitions: list[AttributeDefinition] | None = None
    table_name: str | None = None
    key_schema: list[KeySchemaElement] | None = None
    local_secondary_indexes: list[LocalSecondaryIndex] | None = None
    global_secondary_indexes: list[GlobalSecondaryIndex] | None = None
    billing_mode: str | None = None
    provisioned_throughput: ProvisionedThroughput | None = None
    stream_specification: StreamSpecification | None = None
    sse_specification: SSESpecification | None = _named("SSESpecification")
    tags: list[Tag] | None = None
    table_class: str | None = None
    deletion_protection_enabled: bool | None = None


@dataclass(kw_only=True)
class CreateTableOutput:
    table_description: TableDescription | None = None


@dataclass(kw_only=True)
class DeleteTableInput:
    table_name: str | None = None


@dataclass(kw_only=True)
class DeleteTableOutput:
    table_description: TableDescription | None = None


@dataclass(kw_only=True)
class DescribeTableInput:
    table_name: str | None = None


@dataclass(kw_only=True)
class DescribeTableOutput:
    table: TableDescription | None = None


@dataclass(kw_only=True)
class UpdateTableInput:
    attribute_definitions: list[AttributeDefinition] | None = None
    table_name: str | None = None
    billing_mode: str | None = None
    provisioned_throughput: ProvisionedThroughput | None = None
    global_secondary_index_updates: list[Document] | None = None
    stream_specification: StreamSpecification | None = None
    sse_specification: SSESpecification | None = _named("SSESpecification")
    replica_updates: list[Document] | None = None
    table_class: str | None = None
    deletion_protection_enabled: bool | None = None


@dataclass(kw_only=True)
class UpdateTableOutput:
    table_description: TableDescription | None = None


@dataclass(kw_only=True)
class ListTablesInput:
    exclusive_start_table_name: str | None = None
    limit: int | None = None


@dataclass(kw_only=True)
class ListTablesOutput:
    table_names: list[str] | None = None
    last_evaluated_table_name: str | None = None


@dataclass(kw_only=True)
class DescribeLimitsInput:
    pass


@dataclass(kw_only=True)
class DescribeLimitsOutput:
    account_max_read_capacity_units: int | None = None
    account_max_write_capacity_units: int | None = None
    table_max_read_capacity_units: int | None = None
    table_max_write_capacity_units: int | None = None


@dataclass(kw_only=True)
class DescribeTimeToLiveInput:
    table_name: str | None = None


@dataclass(kw_only=True)
class DescribeTimeToLiveOutput:
    time_to_live_description: TimeToLiveDescription | None = None


@dataclass(kw_only=True)
class UpdateTimeToLiveInput:
    table_name: str | None = None
    time_to_live_specification: TimeToLiveSpecification | None = None


@dataclass(kw_only=True)
class UpdateTimeToLiveOutput:
    time_to_live_specification: TimeToLiveSpecification | None = None


# Tags


@dataclass(kw_only=True)
class ListTagsOfResourceInput:
    resource_arn: str | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class ListTagsOfResourceOutput:
    tags: list[Tag] | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class TagResourceInput:
    resource_arn: str | None = None
    tags: list[Tag] | None = None


@dataclass(kw_only=True)
class TagResourceOutput:
    pass


@dataclass(kw_only=True)
class UntagResourceInput:
    resource_arn: str | None = None
    tag_keys: list[str] | None = None


@dataclass(kw_only=True)
class UntagResourceOutput:
    pass


# Backups


@dataclass(kw_only=True)
class CreateBackupInput:
    table_name: str | None = None
    backup_name: str | None = None


@dataclass(kw_only=True)
class CreateBackupOutput:
    backup_details: BackupDetails | None = None


@dataclass(kw_only=True)
class DeleteBackupInput:
    backup_arn: str | None = None


@dataclass(kw_only=True)
class DeleteBackupOutput:
    backup_description: BackupDescription | None = None


@dataclass(kw_only=True)
class DescribeBackupInput:
    backup_arn: str | None = None


@dataclass(kw_only=True)
class DescribeBackupOutput:
    backup_description: BackupDescription | None = None


@dataclass(kw_only=True)
class ListBackupsInput:
    table_name: str | None = None
    limit: int | None = None
    time_range_lower_bound: datetime | None = None
    time_range_upper_bound: datetime | None = None
    exclusive_start_backup_arn: str | None = None
    backup_type: str | None = None


@dataclass(kw_only=True)
class ListBackupsOutput:
    backup_summaries: list[BackupSummary] | None = None
    last_evaluated_backup_arn: str | None = None


@dataclass(kw_only=True)
class RestoreTableFromBackupInput:
    target_table_name: str | None = None
    backup_arn: str | None = None
    billing_mode_override: str | None = None
    provisioned_throughput_override: ProvisionedThroughput | None = None
    sse_specification_override: SSESpecification | None = _named(
        "SSESpecificationOverride"
    )


@dataclass(kw_only=True)
class RestoreTableFromBackupOutput:
    table_description: TableDescription | None = None


@dataclass(kw_only=True)
class RestoreTableToPointInTimeInput:
    source_table_arn: str | None = None
    source_table_name: str | None = None
    target_table_name: str | None = None
    use_latest_restorable_time: bool | None = None
    restore_date_time: datetime | None = None
    billing_mode_override: str | None = None
    provisioned_throughput_override: ProvisionedThroughput | None = None
    sse_specification_override: SSESpecification | None = _named(
        "SSESpecificationOverride"
    )


@dataclass(kw_only=True)
class RestoreTableToPointInTimeOutput:
    table_description: TableDescription | None = None


@dataclass(kw_only=True)
class DescribeContinuousBackupsInput:
    table_name: str | None = None


@dataclass(kw_only=True)
class DescribeContinuousBackupsOutput:
    continuous_backups_description: ContinuousBackupsDescription | None = None


@dataclass(kw_only=True)
class UpdateContinuousBackupsInput:
    table_name: str | None = None
    point_in_time_recovery_specification: PointInTimeRecoverySpecification | None = (
        None
    )


@dataclass(kw_only=True)
class UpdateContinuousBackupsOutput:
    continuous_backups_description: ContinuousBackupsDescription | None = None


# Global tables


@dataclass(kw_only=True)
class CreateGlobalTableInput:
    global_table_name: str | None = None
    replication_group: list[Replica] | None = None


@dataclass(kw_only=True)
class CreateGlobalTableOutput:
    global_table_description: GlobalTableDescription | None = None


@dataclass(kw_only=True)
class DescribeGlobalTableInput:
    global_table_name: str | None = None


@dataclass(kw_only=True)
class DescribeGlobalTableOutput:
    global_table_description: GlobalTableDescription | None = None


@dataclass(kw_only=True)
class UpdateGlobalTableInput:
    global_table_name: str | None = None
    replica_updates: list[ReplicaUpdate] | None = None


@dataclass(kw_only=True)
class UpdateGlobalTableOutput:
    global_table_description: GlobalTableDescription | None = None


@dataclass(kw_only=True)
class ListGlobalTablesInput:
    exclusive_start_global_table_name: str | None = None
    limit: int | None = None
    region_name: str | None = None


@dataclass(kw_only=True)
class ListGlobalTablesOutput:
    global_tables: list[GlobalTable] | None = None
    last_evaluated_global_table_name: str | None = None


@dataclass(kw_only=True)
class DescribeGlobalTableSettingsInput:
    global_table_name: str | None = None


@dataclass(kw_only=True)
class DescribeGlobalTableSettingsOutput:
    global_table_name: str | None = None
    replica_settings: list[Document] | None = None


@dataclass(kw_only=True)
class UpdateGlobalTableSettingsInput:
    global_table_name: str | None = None
    global_table_billing_mode: str | None = None
    global_table_provisioned_write_capacity_units: int | None = None
    global_table_global_secondary_index_settings_update: list[Document] | None = None
    replica_settings_update: list[Document] | None = None


@dataclass(kw_only=True)
class UpdateGlobalTableSettingsOutput:
    global_table_name: str | None = None
    replica_settings: list[Document] | None = None


# Kinesis streaming


@dataclass(kw_only=True)
class DescribeKinesisStreamingDestinationInput:
    table_name: str | None = None


@dataclass(kw_only=True)
class DescribeKinesisStreamingDestinationOutput:
    table_name: str | None = None
    kinesis_data_stream_destinations: list[KinesisDataStreamDestination] | None = None


@dataclass(kw_only=True)
class KinesisStreamingDestinationInput:
    table_name: str | None = None
    stream_arn: str | None = None


@dataclass(kw_only=True)
class KinesisStreamingDestinationOutput:
    table_name: str | None = None
    stream_arn: str | None = None
    destination_status: str | None = None


# Exports


@dataclass(kw_only=True)
class ExportTableToPointInTimeInput:
    table_arn: str | None = None
    export_time: datetime | None = None
    client_token: str | None = None
    s3_bucket: str | None = None
    s3_bucket_owner: str | None = None
    s3_prefix: str | None = None
    s3_sse_algorithm: str | None = _named("S3SseAlgorithm")
    s3_sse_kms_key_id: str | None = _named("S3SseKmsKeyId")
    export_format: str | None = None


@dataclass(kw_only=True)
class ExportTableToPointInTimeOutput:
    export_description: ExportDescription | None = None


@dataclass(kw_only=True)
class DescribeExportInput:
    export_arn: str | None = None


@dataclass(kw_only=True)
class DescribeExportOutput:
    export_description: ExportDescription | None = None


@dataclass(kw_only=True)
class ListExportsInput:
    table_arn: str | None = None
    max_results: int | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class ListExportsOutput:
    export_summaries: list[ExportSummary] | None = None
    next_token: str | None = None
