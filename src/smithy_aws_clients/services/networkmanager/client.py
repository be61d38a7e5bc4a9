#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from ...client import ServiceClient
from ...operations import HTTPBinding, OperationSpec
from ...protocols import ClientProtocol, RestJSONClientProtocol
from ...types import PathPattern
from .errors import ERRORS
from .models import (
    CreateDeviceInput,
    CreateDeviceOutput,
    CreateGlobalNetworkInput,
    CreateGlobalNetworkOutput,
    CreateLinkInput,
    CreateLinkOutput,
    CreateSiteInput,
    CreateSiteOutput,
    DeleteDeviceInput,
    DeleteDeviceOutput,
    DeleteGlobalNetworkInput,
    DeleteGlobalNetworkOutput,
    DeleteLinkInput,
    DeleteLinkOutput,
    DeleteSiteInput,
    DeleteSiteOutput,
    DescribeGlobalNetworksInput,
    DescribeGlobalNetworksOutput,
    GetDevicesInput,
    GetDevicesOutput,
    GetLinksInput,
    GetLinksOutput,
    GetSitesInput,
    GetSitesOutput,
    ListTagsForResourceInput,
    ListTagsForResourceOutput,
    TagResourceInput,
    TagResourceOutput,
    UntagResourceInput,
    UntagResourceOutput,
    UpdateGlobalNetworkInput,
    UpdateGlobalNetworkOutput,
    UpdateSiteInput,
    UpdateSiteOutput,
)

_GLOBAL_NETWORK = "/global-networks/{global_network_id}"
_PAGE = {"max_results": "maxResults", "next_token": "nextToken"}

CREATE_GLOBAL_NETWORK = OperationSpec(
    name="CreateGlobalNetwork",
    input=CreateGlobalNetworkInput,
    output=CreateGlobalNetworkOutput,
    http=HTTPBinding(method="POST", path=PathPattern("/global-networks")),
)
DESCRIBE_GLOBAL_NETWORKS = OperationSpec(
    name="DescribeGlobalNetworks",
    input=DescribeGlobalNetworksInput,
    output=DescribeGlobalNetworksOutput,
    http=HTTPBinding(
        method="GET",
        path=PathPattern("/global-networks"),
        query={"global_network_ids": "globalNetworkIds", **_PAGE},
    ),
)
UPDATE_GLOBAL_NETWORK = OperationSpec(
    name="UpdateGlobalNetwork",
    input=UpdateGlobalNetworkInput,
    output=UpdateGlobalNetworkOutput,
    required=("global_network_id",),
    http=HTTPBinding(method="PATCH", path=PathPattern(_GLOBAL_NETWORK)),
)
DELETE_GLOBAL_NETWORK = OperationSpec(
    name="DeleteGlobalNetwork",
    input=DeleteGlobalNetworkInput,
    output=DeleteGlobalNetworkOutput,
    required=("global_network_id",),
    http=HTTPBinding(method="DELETE", path=PathPattern(_GLOBAL_NETWORK)),
)

CREATE_SITE = OperationSpec(
    name="CreateSite",
    input=CreateSiteInput,
    output=CreateSiteOutput,
    required=("global_network_id",),
    http=HTTPBinding(method="POST", path=PathPattern(f"{_GLOBAL_NETWORK}/sites")),
)
GET_SITES = OperationSpec(
    name="GetSites",
    input=GetSitesInput,
    output=GetSitesOutput,
    required=("global_network_id",),
    http=HTTPBinding(
        method="GET",
        path=PathPattern(f"{_GLOBAL_NETWORK}/sites"),
        query={"site_ids": "siteIds", **_PAGE},
    ),
)
UPDATE_SITE = OperationSpec(
    name="UpdateSite",
    input=UpdateSiteInput,
    output=UpdateSiteOutput,
    required=("global_network_id", "site_id"),
    http=HTTPBinding(
        method="PATCH", path=PathPattern(f"{_GLOBAL_NETWORK}/sites/{{site_id}}")
    ),
)
DELETE_SITE = OperationSpec(
    name="DeleteSite",
    input=DeleteSiteInput,
    output=DeleteSiteOutput,
    required=("global_network_id", "site_id"),
    http=HTTPBinding(
        method="DELETE", path=PathPattern(f"{_GLOBAL_NETWORK}/sites/{{site_id}}")
    ),
)

CREATE_DEVICE = OperationSpec(
    name="CreateDevice",
    input=CreateDeviceInput,
    output=CreateDeviceOutput,
    required=("global_network_id",),
    http=HTTPBinding(method="POST", path=PathPattern(f"{_GLOBAL_NETWORK}/devices")),
)
GET_DEVICES = OperationSpec(
    name="GetDevices",
    input=GetDevicesInput,
    output=GetDevicesOutput,
    required=("global_network_id",),
    http=HTTPBinding(
        method="GET",
        path=PathPattern(f"{_GLOBAL_NETWORK}/devices"),
        query={"device_ids": "deviceIds", "site_id": "siteId", **_PAGE},
    ),
)
DELETE_DEVICE = OperationSpec(
    name="DeleteDevice",
    input=DeleteDeviceInput,
    output=DeleteDeviceOutput,
    required=("global_network_id", "device_id"),
    http=HTTPBinding(
        method="DELETE", path=PathPattern(f"{_GLOBAL_NETWORK}/devices/{{device_id}}")
    ),
)

CREATE_LINK = OperationSpec(
    name="CreateLink",
    input=CreateLinkInput,
    output=CreateLinkOutput,
    required=("global_network_id", "bandwidth", "site_id"),
    http=HTTPBinding(method="POST", path=PathPattern(f"{_GLOBAL_NETWORK}/links")),
)
GET_LINKS = OperationSpec(
    name="GetLinks",
    input=GetLinksInput,
    output=GetLinksOutput,
    required=("global_network_id",),
    http=HTTPBinding(
        method="GET",
        path=PathPattern(f"{_GLOBAL_NETWORK}/links"),
        query={
            "link_ids": "linkIds",
            "site_id": "siteId",
            "type": "type",
            "provider": "provider",
            **_PAGE,
        },
    ),
)
DELETE_LINK = OperationSpec(
    name="DeleteLink",
    input=DeleteLinkInput,
    output=DeleteLinkOutput,
    required=("global_network_id", "link_id"),
    http=HTTPBinding(
        method="DELETE", path=PathPattern(f"{_GLOBAL_NETWORK}/links/{{link_id}}")
    ),
)

LIST_TAGS_FOR_RESOURCE = OperationSpec(
    name="ListTagsForResource",
    input=ListTagsForResourceInput,
    output=ListTagsForResourceOutput,
    required=("resource_arn",),
    http=HTTPBinding(method="GET", path=PathPattern("/tags/{resource_arn}")),
)
TAG_RESOURCE = OperationSpec(
    name="TagResource",
    input=TagResourceInput,
    output=TagResourceOutput,
    required=("resource_arn", "tags"),
    http=HTTPBinding(method="POST", path=PathPattern("/tags/{resource_arn}")),
)
UNTAG_RESOURCE = OperationSpec(
    name="UntagResource",
    input=UntagResourceInput,
    output=UntagResourceOutput,
    required=("resource_arn", "tag_keys"),
    http=HTTPBinding(
        method="DELETE",
        path=PathPattern("/tags/{resource_arn}"),
        query={"tag_keys": "tagKeys"},
    ),
)


class NetworkManagerClient(ServiceClient):
    """Client for AWS Network Manager."""

    endpoint_prefix = "networkmanager"
    signing_name = "networkmanager"

    def _create_protocol(self) -> ClientProtocol:
        return RestJSONClientProtocol(errors=ERRORS)

    async def create_global_network(
        self, input: CreateGlobalNetworkInput
    ) -> CreateGlobalNetworkOutput:
        """Creates a new, empty global network."""
        return await self._execute_operation(input, CREATE_GLOBAL_NETWORK)

    async def describe_global_networks(
        self, input: DescribeGlobalNetworksInput
    ) -> DescribeGlobalNetworksOutput:
        """Describes one or more global networks.

        All global networks of the account are described if no ids are given.
        """
        return await self._execute_operation(input, DESCRIBE_GLOBAL_NETWORKS)

    async def update_global_network(
        self, input: UpdateGlobalNetworkInput
    ) -> UpdateGlobalNetworkOutput:
        return await self._execute_operation(input, UPDATE_GLOBAL_NETWORK)

    async def delete_global_network(
        self, input: DeleteGlobalNetworkInput
    ) -> DeleteGlobalNetworkOutput:
        """Deletes a global network, which must have no remaining resources."""
        return await self._execute_operation(input, DELETE_GLOBAL_NETWORK)

    async def create_site(self, input: CreateSiteInput) -> CreateSiteOutput:
        return await self._execute_operation(input, CREATE_SITE)

    async def get_sites(self, input: GetSitesInput) -> GetSitesOutput:
        """Gets information about one or more sites in a global network."""
        return await self._execute_operation(input, GET_SITES)

    async def update_site(self, input: UpdateSiteInput) -> UpdateSiteOutput:
        return await self._execute_operation(input, UPDATE_SITE)

    async def delete_site(self, input: DeleteSiteInput) -> DeleteSiteOutput:
        return await self._execute_operation(input, DELETE_SITE)

    async def create_device(self, input: CreateDeviceInput) -> CreateDeviceOutput:
        return await self._execute_operation(input, CREATE_DEVICE)

    async def get_devices(self, input: GetDevicesInput) -> GetDevicesOutput:
        return await self._execute_operation(input, GET_DEVICES)

    async def delete_device(self, input: DeleteDeviceInput) -> DeleteDeviceOutput:
        return await self._execute_operation(input, DELETE_DEVICE)

    async def create_link(self, input: CreateLinkInput) -> CreateLinkOutput:
        return await self._execute_operation(input, CREATE_LINK)

    async def get_links(self, input: GetLinksInput) -> GetLinksOutput:
        return await self._execute_operation(input, GET_LINKS)

    async def delete_link(self, input: DeleteLinkInput) -> DeleteLinkOutput:
        return await self._execute_operation(input, DELETE_LINK)

    async def list_tags_for_resource(
        self, input: ListTagsForResourceInput
    ) -> ListTagsForResourceOutput:
        return await self._execute_operation(input, LIST_TAGS_FOR_RESOURCE)

    async def tag_resource(self, input: TagResourceInput) -> TagResourceOutput:
        return await self._execute_operation(input, TAG_RESOURCE)

    async def untag_resource(self, input: UntagResourceInput) -> UntagResourceOutput:
        return await self._execute_operation(input, UNTAG_RESOURCE)
