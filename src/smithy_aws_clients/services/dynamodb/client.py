#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from typing import Final

from ...client import ServiceClient
from ...config import Config
from ...discovery import DISCOVERED_ADDRESS, EndpointDiscoveryResolver
from ...interfaces import EndpointResolver
from ...operations import DiscoveryMode, OperationSpec
from ...protocols import AWSJSONClientProtocol, ClientProtocol
from ...types import TypedProperties
from .errors import ERRORS, InvalidEndpointException
from .models import (
    BatchExecuteStatementInput,
    BatchExecuteStatementOutput,
    BatchGetItemInput,
    BatchGetItemOutput,
    BatchWriteItemInput,
    BatchWriteItemOutput,
    CreateBackupInput,
    CreateBackupOutput,
    CreateGlobalTableInput,
    CreateGlobalTableOutput,
    CreateTableInput,
    CreateTableOutput,
    DeleteBackupInput,
    DeleteBackupOutput,
    DeleteItemInput,
    DeleteItemOutput,
    DeleteTableInput,
    DeleteTableOutput,
    DescribeBackupInput,
    DescribeBackupOutput,
    DescribeContinuousBackupsInput,
    DescribeContinuousBackupsOutput,
    DescribeEndpointsInput,
    DescribeEndpointsOutput,
    DescribeExportInput,
    DescribeExportOutput,
    DescribeGlobalTableInput,
    DescribeGlobalTableOutput,
    DescribeGlobalTableSettingsInput,
    DescribeGlobalTableSettingsOutput,
    DescribeKinesisStreamingDestinationInput,
    DescribeKinesisStreamingDestinationOutput,
    DescribeLimitsInput,
    DescribeLimitsOutput,
    DescribeTableInput,
    DescribeTableOutput,
    DescribeTimeToLiveInput,
    DescribeTimeToLiveOutput,
    Endpoint,
    ExecuteStatementInput,
    ExecuteStatementOutput,
    ExecuteTransactionInput,
    ExecuteTransactionOutput,
    ExportTableToPointInTimeInput,
    ExportTableToPointInTimeOutput,
    GetItemInput,
    GetItemOutput,
    KinesisStreamingDestinationInput,
    KinesisStreamingDestinationOutput,
    ListBackupsInput,
    ListBackupsOutput,
    ListExportsInput,
    ListExportsOutput,
    ListGlobalTablesInput,
    ListGlobalTablesOutput,
    ListTablesInput,
    ListTablesOutput,
    ListTagsOfResourceInput,
    ListTagsOfResourceOutput,
    PutItemInput,
    PutItemOutput,
    QueryInput,
    QueryOutput,
    RestoreTableFromBackupInput,
    RestoreTableFromBackupOutput,
    RestoreTableToPointInTimeInput,
    RestoreTableToPointInTimeOutput,
    ScanInput,
    ScanOutput,
    TagResourceInput,
    TagResourceOutput,
    TransactGetItemsInput,
    TransactGetItemsOutput,
    TransactWriteItemsInput,
    TransactWriteItemsOutput,
    UntagResourceInput,
    UntagResourceOutput,
    UpdateContinuousBackupsInput,
    UpdateContinuousBackupsOutput,
    UpdateGlobalTableInput,
    UpdateGlobalTableOutput,
    UpdateGlobalTableSettingsInput,
    UpdateGlobalTableSettingsOutput,
    UpdateItemInput,
    UpdateItemOutput,
    UpdateTableInput,
    UpdateTableOutput,
    UpdateTimeToLiveInput,
    UpdateTimeToLiveOutput,
)

logger: Final = logging.getLogger(__name__)

TARGET_PREFIX: Final = "DynamoDB_20120810"

_OPTIONAL = DiscoveryMode.OPTIONAL

DESCRIBE_ENDPOINTS = OperationSpec(
    name="DescribeEndpoints",
    input=DescribeEndpointsInput,
    output=DescribeEndpointsOutput,
)

BATCH_GET_ITEM = OperationSpec(
    name="BatchGetItem",
    input=BatchGetItemInput,
    output=BatchGetItemOutput,
    required=("request_items",),
    discovery=_OPTIONAL,
)
BATCH_WRITE_ITEM = OperationSpec(
    name="BatchWriteItem",
    input=BatchWriteItemInput,
    output=BatchWriteItemOutput,
    required=("request_items",),
    discovery=_OPTIONAL,
)
CREATE_BACKUP = OperationSpec(
    name="CreateBackup",
    input=CreateBackupInput,
    output=CreateBackupOutput,
    required=("table_name", "backup_name"),
    discovery=_OPTIONAL,
)
CREATE_GLOBAL_TABLE = OperationSpec(
    name="CreateGlobalTable",
    input=CreateGlobalTableInput,
    output=CreateGlobalTableOutput,
    required=("global_table_name", "replication_group"),
    discovery=_OPTIONAL,
)
CREATE_TABLE = OperationSpec(
    name="CreateTable",
    input=CreateTableInput,
    output=CreateTableOutput,
    required=("attribute_definitions", "table_name", "key_schema"),
    discovery=_OPTIONAL,
)
DELETE_BACKUP = OperationSpec(
    name="DeleteBackup",
    input=DeleteBackupInput,
    output=DeleteBackupOutput,
    required=("backup_arn",),
    discovery=_OPTIONAL,
)
DELETE_ITEM = OperationSpec(
    name="DeleteItem",
    input=DeleteItemInput,
    output=DeleteItemOutput,
    required=("table_name", "key"),
    discovery=_OPTIONAL,
)
DELETE_TABLE = OperationSpec(
    name="DeleteTable",
    input=DeleteTableInput,
    output=DeleteTableOutput,
    required=("table_name",),
    discovery=_OPTIONAL,
)
DESCRIBE_BACKUP = OperationSpec(
    name="DescribeBackup",
    input=DescribeBackupInput,
    output=DescribeBackupOutput,
    required=("backup_arn",),
    discovery=_OPTIONAL,
)
DESCRIBE_CONTINUOUS_BACKUPS = OperationSpec(
    name="DescribeContinuousBackups",
    input=DescribeContinuousBackupsInput,
    output=DescribeContinuousBackupsOutput,
    required=("table_name",),
    discovery=_OPTIONAL,
)
DESCRIBE_GLOBAL_TABLE = OperationSpec(
    name="DescribeGlobalTable",
    input=DescribeGlobalTableInput,
    output=DescribeGlobalTableOutput,
    required=("global_table_name",),
    discovery=_OPTIONAL,
)
DESCRIBE_GLOBAL_TABLE_SETTINGS = OperationSpec(
    name="DescribeGlobalTableSettings",
    input=DescribeGlobalTableSettingsInput,
    output=DescribeGlobalTableSettingsOutput,
    required=("global_table_name",),
    discovery=_OPTIONAL,
)
DESCRIBE_KINESIS_STREAMING_DESTINATION = OperationSpec(
    name="DescribeKinesisStreamingDestination",
    input=DescribeKinesisStreamingDestinationInput,
    output=DescribeKinesisStreamingDestinationOutput,
    required=("table_name",),
    discovery=_OPTIONAL,
)
DESCRIBE_LIMITS = OperationSpec(
    name="DescribeLimits",
    input=DescribeLimitsInput,
    output=DescribeLimitsOutput,
    discovery=_OPTIONAL,
)
DESCRIBE_TABLE = OperationSpec(
    name="DescribeTable",
    input=DescribeTableInput,
    output=DescribeTableOutput,
    required=("table_name",),
    discovery=_OPTIONAL,
)
DESCRIBE_TIME_TO_LIVE = OperationSpec(
    name="DescribeTimeToLive",
    input=DescribeTimeToLiveInput,
    output=DescribeTimeToLiveOutput,
    required=("table_name",),
    discovery=_OPTIONAL,
)
DISABLE_KINESIS_STREAMING_DESTINATION = OperationSpec(
    name="DisableKinesisStreamingDestination",
    input=KinesisStreamingDestinationInput,
    output=KinesisStreamingDestinationOutput,
    required=("table_name", "stream_arn"),
    discovery=_OPTIONAL,
)
ENABLE_KINESIS_STREAMING_DESTINATION = OperationSpec(
    name="EnableKinesisStreamingDestination",
    input=KinesisStreamingDestinationInput,
    output=KinesisStreamingDestinationOutput,
    required=("table_name", "stream_arn"),
    discovery=_OPTIONAL,
)
GET_ITEM = OperationSpec(
    name="GetItem",
    input=GetItemInput,
    output=GetItemOutput,
    required=("table_name", "key"),
    discovery=_OPTIONAL,
)
LIST_BACKUPS = OperationSpec(
    name="ListBackups",
    input=ListBackupsInput,
    output=ListBackupsOutput,
    discovery=_OPTIONAL,
)
LIST_GLOBAL_TABLES = OperationSpec(
    name="ListGlobalTables",
    input=ListGlobalTablesInput,
    output=ListGlobalTablesOutput,
    discovery=_OPTIONAL,
)
LIST_TABLES = OperationSpec(
    name="ListTables",
    input=ListTablesInput,
    output=ListTablesOutput,
    discovery=_OPTIONAL,
)
LIST_TAGS_OF_RESOURCE = OperationSpec(
    name="ListTagsOfResource",
    input=ListTagsOfResourceInput,
    output=ListTagsOfResourceOutput,
    required=("resource_arn",),
    discovery=_OPTIONAL,
)
PUT_ITEM = OperationSpec(
    name="PutItem",
    input=PutItemInput,
    output=PutItemOutput,
    required=("table_name", "item"),
    discovery=_OPTIONAL,
)
QUERY = OperationSpec(
    name="Query",
    input=QueryInput,
    output=QueryOutput,
    required=("table_name",),
    discovery=_OPTIONAL,
)
RESTORE_TABLE_FROM_BACKUP = OperationSpec(
    name="RestoreTableFromBackup",
    input=RestoreTableFromBackupInput,
    output=RestoreTableFromBackupOutput,
    required=("target_table_name", "backup_arn"),
    discovery=_OPTIONAL,
)
RESTORE_TABLE_TO_POINT_IN_TIME = OperationSpec(
    name="RestoreTableToPointInTime",
    input=RestoreTableToPointInTimeInput,
    output=RestoreTableToPointInTimeOutput,
    required=("target_table_name",),
    discovery=_OPTIONAL,
)
SCAN = OperationSpec(
    name="Scan",
    input=ScanInput,
    output=ScanOutput,
    required=("table_name",),
    discovery=_OPTIONAL,
)
TAG_RESOURCE = OperationSpec(
    name="TagResource",
    input=TagResourceInput,
    output=TagResourceOutput,
    required=("resource_arn", "tags"),
    discovery=_OPTIONAL,
)
TRANSACT_GET_ITEMS = OperationSpec(
    name="TransactGetItems",
    input=TransactGetItemsInput,
    output=TransactGetItemsOutput,
    required=("transact_items",),
    discovery=_OPTIONAL,
)
TRANSACT_WRITE_ITEMS = OperationSpec(
    name="TransactWriteItems",
    input=TransactWriteItemsInput,
    output=TransactWriteItemsOutput,
    required=("transact_items",),
    discovery=_OPTIONAL,
)
UNTAG_RESOURCE = OperationSpec(
    name="UntagResource",
    input=UntagResourceInput,
    output=UntagResourceOutput,
    required=("resource_arn", "tag_keys"),
    discovery=_OPTIONAL,
)
UPDATE_CONTINUOUS_BACKUPS = OperationSpec(
    name="UpdateContinuousBackups",
    input=UpdateContinuousBackupsInput,
    output=UpdateContinuousBackupsOutput,
    required=("table_name", "point_in_time_recovery_specification"),
    discovery=_OPTIONAL,
)
UPDATE_GLOBAL_TABLE = OperationSpec(
    name="UpdateGlobalTable",
    input=UpdateGlobalTableInput,
    output=UpdateGlobalTableOutput,
    required=("global_table_name", "replica_updates"),
    discovery=_OPTIONAL,
)
UPDATE_GLOBAL_TABLE_SETTINGS = OperationSpec(
    name="UpdateGlobalTableSettings",
    input=UpdateGlobalTableSettingsInput,
    output=UpdateGlobalTableSettingsOutput,
    required=("global_table_name",),
    discovery=_OPTIONAL,
)
UPDATE_ITEM = OperationSpec(
    name="UpdateItem",
    input=UpdateItemInput,
    output=UpdateItemOutput,
    required=("table_name", "key"),
    discovery=_OPTIONAL,
)
UPDATE_TABLE = OperationSpec(
    name="UpdateTable",
    input=UpdateTableInput,
    output=UpdateTableOutput,
    required=("table_name",),
    discovery=_OPTIONAL,
)
UPDATE_TIME_TO_LIVE = OperationSpec(
    name="UpdateTimeToLive",
    input=UpdateTimeToLiveInput,
    output=UpdateTimeToLiveOutput,
    required=("table_name", "time_to_live_specification"),
    discovery=_OPTIONAL,
)

# PartiQL and export operations are never routed through discovered endpoints.
EXECUTE_STATEMENT = OperationSpec(
    name="ExecuteStatement",
    input=ExecuteStatementInput,
    output=ExecuteStatementOutput,
    required=("statement",),
)
BATCH_EXECUTE_STATEMENT = OperationSpec(
    name="BatchExecuteStatement",
    input=BatchExecuteStatementInput,
    output=BatchExecuteStatementOutput,
    required=("statements",),
)
EXECUTE_TRANSACTION = OperationSpec(
    name="ExecuteTransaction",
    input=ExecuteTransactionInput,
    output=ExecuteTransactionOutput,
    required=("transact_statements",),
)
EXPORT_TABLE_TO_POINT_IN_TIME = OperationSpec(
    name="ExportTableToPointInTime",
    input=ExportTableToPointInTimeInput,
    output=ExportTableToPointInTimeOutput,
    required=("table_arn", "s3_bucket"),
)
DESCRIBE_EXPORT = OperationSpec(
    name="DescribeExport",
    input=DescribeExportInput,
    output=DescribeExportOutput,
    required=("export_arn",),
)
LIST_EXPORTS = OperationSpec(
    name="ListExports",
    input=ListExportsInput,
    output=ListExportsOutput,
)


class DynamoDBClient(ServiceClient):
    """Client for Amazon DynamoDB.

    When ``endpoint_discovery_enabled`` is set in the config, data and control plane
    operations are sent to the endpoint returned by ``DescribeEndpoints``, which is
    cached for the period the service advertises. Discovery failures fall back to
    the regional endpoint.
    """

    endpoint_prefix = "dynamodb"
    signing_name = "dynamodb"

    def _create_protocol(self) -> ClientProtocol:
        return AWSJSONClientProtocol(
            target_prefix=TARGET_PREFIX, json_version="1.0", errors=ERRORS
        )

    def _create_endpoint_resolver(self, config: Config) -> EndpointResolver:
        return EndpointDiscoveryResolver(
            static_resolver=super()._create_endpoint_resolver(config),
            cache=config.endpoint_cache,
            discover=self._discover_endpoints,
        )

    async def _discover_endpoints(self) -> list[Endpoint]:
        output = await self.describe_endpoints(DescribeEndpointsInput())
        return output.endpoints or []

    async def _execute_operation[I, O](
        self,
        input: I,
        operation: OperationSpec[I, O],
        context: TypedProperties | None = None,
    ) -> O:
        if context is None:
            context = TypedProperties()
        try:
            return await super()._execute_operation(input, operation, context)
        except InvalidEndpointException:
            resolver = self._endpoint_resolver
            address = context.get(DISCOVERED_ADDRESS)
            if address is not None and isinstance(resolver, EndpointDiscoveryResolver):
                logger.debug(
                    "%s was sent to invalid endpoint %s, evicting it",
                    operation.name,
                    address,
                )
                resolver.evict(address)
            raise

    async def describe_endpoints(
        self, input: DescribeEndpointsInput
    ) -> DescribeEndpointsOutput:
        """Returns the regional endpoint information."""
        return await self._execute_operation(input, DESCRIBE_ENDPOINTS)

    async def batch_get_item(self, input: BatchGetItemInput) -> BatchGetItemOutput:
        """Returns the attributes of one or more items from one or more tables.

        Keys that couldn't be processed are returned in ``unprocessed_keys``.
        """
        return await self._execute_operation(input, BATCH_GET_ITEM)

    async def batch_write_item(
        self, input: BatchWriteItemInput
    ) -> BatchWriteItemOutput:
        """Puts or deletes multiple items in one or more tables."""
        return await self._execute_operation(input, BATCH_WRITE_ITEM)

    async def create_backup(self, input: CreateBackupInput) -> CreateBackupOutput:
        return await self._execute_operation(input, CREATE_BACKUP)

    async def create_global_table(
        self, input: CreateGlobalTableInput
    ) -> CreateGlobalTableOutput:
        return await self._execute_operation(input, CREATE_GLOBAL_TABLE)

    async def create_table(self, input: CreateTableInput) -> CreateTableOutput:
        """Adds a new table to the account."""
        return await self._execute_operation(input, CREATE_TABLE)

    async def delete_backup(self, input: DeleteBackupInput) -> DeleteBackupOutput:
        return await self._execute_operation(input, DELETE_BACKUP)

    async def delete_item(self, input: DeleteItemInput) -> DeleteItemOutput:
        """Deletes a single item in a table by primary key."""
        return await self._execute_operation(input, DELETE_ITEM)

    async def delete_table(self, input: DeleteTableInput) -> DeleteTableOutput:
        return await self._execute_operation(input, DELETE_TABLE)

    async def describe_backup(
        self, input: DescribeBackupInput
    ) -> DescribeBackupOutput:
        return await self._execute_operation(input, DESCRIBE_BACKUP)

    async def describe_continuous_backups(
        self, input: DescribeContinuousBackupsInput
    ) -> DescribeContinuousBackupsOutput:
        return await self._execute_operation(input, DESCRIBE_CONTINUOUS_BACKUPS)

    async def describe_global_table(
        self, input: DescribeGlobalTableInput
    ) -> DescribeGlobalTableOutput:
        return await self._execute_operation(input, DESCRIBE_GLOBAL_TABLE)

    async def describe_global_table_settings(
        self, input: DescribeGlobalTableSettingsInput
    ) -> DescribeGlobalTableSettingsOutput:
        return await self._execute_operation(input, DESCRIBE_GLOBAL_TABLE_SETTINGS)

    async def describe_kinesis_streaming_destination(
        self, input: DescribeKinesisStreamingDestinationInput
    ) -> DescribeKinesisStreamingDestinationOutput:
        return await self._execute_operation(
            input, DESCRIBE_KINESIS_STREAMING_DESTINATION
        )

    async def describe_limits(
        self, input: DescribeLimitsInput
    ) -> DescribeLimitsOutput:
        """Returns the provisioned capacity quotas of the account in the region."""
        return await self._execute_operation(input, DESCRIBE_LIMITS)

    async def describe_table(self, input: DescribeTableInput) -> DescribeTableOutput:
        """Returns information about a table, including its status and key schema."""
        return await self._execute_operation(input, DESCRIBE_TABLE)

    async def describe_time_to_live(
        self, input: DescribeTimeToLiveInput
    ) -> DescribeTimeToLiveOutput:
        return await self._execute_operation(input, DESCRIBE_TIME_TO_LIVE)

    async def disable_kinesis_streaming_destination(
        self, input: KinesisStreamingDestinationInput
    ) -> KinesisStreamingDestinationOutput:
        return await self._execute_operation(
            input, DISABLE_KINESIS_STREAMING_DESTINATION
        )

    async def enable_kinesis_streaming_destination(
        self, input: KinesisStreamingDestinationInput
    ) -> KinesisStreamingDestinationOutput:
        return await self._execute_operation(
            input, ENABLE_KINESIS_STREAMING_DESTINATION
        )

    async def get_item(self, input: GetItemInput) -> GetItemOutput:
        """Returns the attributes of the item with the given primary key.

        The output has no ``item`` if there is no matching item.
        """
        return await self._execute_operation(input, GET_ITEM)

    async def list_backups(self, input: ListBackupsInput) -> ListBackupsOutput:
        return await self._execute_operation(input, LIST_BACKUPS)

    async def list_global_tables(
        self, input: ListGlobalTablesInput
    ) -> ListGlobalTablesOutput:
        return await self._execute_operation(input, LIST_GLOBAL_TABLES)

    async def list_tables(self, input: ListTablesInput) -> ListTablesOutput:
        """Returns a page of the table names of the account in the region."""
        return await self._execute_operation(input, LIST_TABLES)

    async def list_tags_of_resource(
        self, input: ListTagsOfResourceInput
    ) -> ListTagsOfResourceOutput:
        return await self._execute_operation(input, LIST_TAGS_OF_RESOURCE)

    async def put_item(self, input: PutItemInput) -> PutItemOutput:
        """Creates a new item, or replaces an old item with a new item."""
        return await self._execute_operation(input, PUT_ITEM)

    async def query(self, input: QueryInput) -> QueryOutput:
        """Finds items by primary key."""
        return await self._execute_operation(input, QUERY)

    async def restore_table_from_backup(
        self, input: RestoreTableFromBackupInput
    ) -> RestoreTableFromBackupOutput:
        return await self._execute_operation(input, RESTORE_TABLE_FROM_BACKUP)

    async def restore_table_to_point_in_time(
        self, input: RestoreTableToPointInTimeInput
    ) -> RestoreTableToPointInTimeOutput:
        return await self._execute_operation(input, RESTORE_TABLE_TO_POINT_IN_TIME)

    async def scan(self, input: ScanInput) -> ScanOutput:
        """Reads every item in a table or index."""
        return await self._execute_operation(input, SCAN)

    async def tag_resource(self, input: TagResourceInput) -> TagResourceOutput:
        return await self._execute_operation(input, TAG_RESOURCE)

    async def transact_get_items(
        self, input: TransactGetItemsInput
    ) -> TransactGetItemsOutput:
        """Atomically retrieves up to 100 items."""
        return await self._execute_operation(input, TRANSACT_GET_ITEMS)

    async def transact_write_items(
        self, input: TransactWriteItemsInput
    ) -> TransactWriteItemsOutput:
        """Atomically applies up to 100 write actions.

        :raises TransactionCanceledException: with one cancellation reason per
            action if any of them fails.
        """
        return await self._execute_operation(input, TRANSACT_WRITE_ITEMS)

    async def untag_resource(self, input: UntagResourceInput) -> UntagResourceOutput:
        return await self._execute_operation(input, UNTAG_RESOURCE)

    async def update_continuous_backups(
        self, input: UpdateContinuousBackupsInput
    ) -> UpdateContinuousBackupsOutput:
        return await self._execute_operation(input, UPDATE_CONTINUOUS_BACKUPS)

    async def update_global_table(
        self, input: UpdateGlobalTableInput
    ) -> UpdateGlobalTableOutput:
        return await self._execute_operation(input, UPDATE_GLOBAL_TABLE)

    async def update_global_table_settings(
        self, input: UpdateGlobalTableSettingsInput
    ) -> UpdateGlobalTableSettingsOutput:
        return await self._execute_operation(input, UPDATE_GLOBAL_TABLE_SETTINGS)

    async def update_item(self, input: UpdateItemInput) -> UpdateItemOutput:
        """Edits an existing item's attributes, or adds a new item."""
        return await self._execute_operation(input, UPDATE_ITEM)

    async def update_table(self, input: UpdateTableInput) -> UpdateTableOutput:
        return await self._execute_operation(input, UPDATE_TABLE)

    async def update_time_to_live(
        self, input: UpdateTimeToLiveInput
    ) -> UpdateTimeToLiveOutput:
        return await self._execute_operation(input, UPDATE_TIME_TO_LIVE)

    async def execute_statement(
        self, input: ExecuteStatementInput
    ) -> ExecuteStatementOutput:
        """Runs a PartiQL statement."""
        return await self._execute_operation(input, EXECUTE_STATEMENT)

    async def batch_execute_statement(
        self, input: BatchExecuteStatementInput
    ) -> BatchExecuteStatementOutput:
        return await self._execute_operation(input, BATCH_EXECUTE_STATEMENT)

    async def execute_transaction(
        self, input: ExecuteTransactionInput
    ) -> ExecuteTransactionOutput:
        return await self._execute_operation(input, EXECUTE_TRANSACTION)

    async def export_table_to_point_in_time(
        self, input: ExportTableToPointInTimeInput
    ) -> ExportTableToPointInTimeOutput:
        return await self._execute_operation(input, EXPORT_TABLE_TO_POINT_IN_TIME)

    async def describe_export(
        self, input: DescribeExportInput
    ) -> DescribeExportOutput:
        return await self._execute_operation(input, DESCRIBE_EXPORT)

    async def list_exports(self, input: ListExportsInput) -> ListExportsOutput:
        return await self._execute_operation(input, LIST_EXPORTS)
