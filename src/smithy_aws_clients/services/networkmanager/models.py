#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(kw_only=True)
class Tag:
    key: str | None = None
    value: str | None = None


@dataclass(kw_only=True)
class Location:
    address: str | None = None
    latitude: str | None = None
    longitude: str | None = None


@dataclass(kw_only=True)
class AWSLocation:
    zone: str | None = None
    subnet_arn: str | None = None


@dataclass(kw_only=True)
class Bandwidth:
    upload_speed: int | None = None
    download_speed: int | None = None


@dataclass(kw_only=True)
class GlobalNetwork:
    global_network_id: str | None = None
    global_network_arn: str | None = None
    description: str | None = None
    created_at: datetime | None = None
    state: str | None = None
    tags: list[Tag] | None = None


@dataclass(kw_only=True)
class Site:
    site_id: str | None = None
    site_arn: str | None = None
    global_network_id: str | None = None
    description: str | None = None
    location: Location | None = None
    created_at: datetime | None = None
    state: str | None = None
    tags: list[Tag] | None = None


@dataclass(kw_only=True)
class Device:
    device_id: str | None = None
    device_arn: str | None = None
    global_network_id: str | None = None
    aws_location: AWSLocation | None = field(
        default=None, metadata={"name": "AWSLocation"}
    )
    description: str | None = None
    type: str | None = None
    vendor: str | None = None
    model: str | None = None
    serial_number: str | None = None
    location: Location | None = None
    site_id: str | None = None
    created_at: datetime | None = None
    state: str | None = None
    tags: list[Tag] | None = None


@dataclass(kw_only=True)
class Link:
    link_id: str | None = None
    link_arn: str | None = None
    global_network_id: str | None = None
    site_id: str | None = None
    description: str | None = None
    type: str | None = None
    bandwidth: Bandwidth | None = None
    provider: str | None = None
    created_at: datetime | None = None
    state: str | None = None
    tags: list[Tag] | None = None


# Global networks


@dataclass(kw_only=True)
class CreateGlobalNetworkInput:
    description: str | None = None
    tags: list[Tag] | None = None


@dataclass(kw_only=True)
class CreateGlobalNetworkOutput:
    global_network: GlobalNetwork | None = None


@dataclass(kw_only=True)
class DescribeGlobalNetworksInput:
    global_network_ids: list[str] | None = None
    max_results: int | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class DescribeGlobalNetworksOutput:
    global_networks: list[GlobalNetwork] | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class UpdateGlobalNetworkInput:
    global_network_id: str | None = None
    description: str | None = None


@dataclass(kw_only=True)
class UpdateGlobalNetworkOutput:
    global_network: GlobalNetwork | None = None


@dataclass(kw_only=True)
class DeleteGlobalNetworkInput:
    global_network_id: str | None = None


@dataclass(kw_only=True)
class DeleteGlobalNetworkOutput:
    global_network: GlobalNetwork | None = None


# Sites


@dataclass(kw_only=True)
class CreateSiteInput:
    global_network_id: str | None = None
    description: str | None = None
    location: Location | None = None
    tags: list[Tag] | None = None


@dataclass(kw_only=True)
class CreateSiteOutput:
    site: Site | None = None


@dataclass(kw_only=True)
class GetSitesInput:
    global_network_id: str | None = None
    site_ids: list[str] | None = None
    max_results: int | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class GetSitesOutput:
    sites: list[Site] | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class UpdateSiteInput:
    global_network_id: str | None = None
    site_id: str | None = None
    description: str | None = None
    location: Location | None = None


@dataclass(kw_only=True)
class UpdateSiteOutput:
    site: Site | None = None


@dataclass(kw_only=True)
class DeleteSiteInput:
    global_network_id: str | None = None
    site_id: str | None = None


@dataclass(kw_only=True)
class DeleteSiteOutput:
    site: Site | None = None


# Devices


@dataclass(kw_only=True)
class CreateDeviceInput:
    global_network_id: str | None = None
    aws_location: AWSLocation | None = field(
        default=None, metadata={"name": "AWSLocation"}
    )
    description: str | None = None
    type: str | None = None
    vendor: str | None = None
    model: str | None = None
    serial_number: str | None = None
    location: Location | None = None
    site_id: str | None = None
    tags: list[Tag] | None = None


@dataclass(kw_only=True)
class CreateDeviceOutput:
    device: Device | None = None


@dataclass(kw_only=True)
class GetDevicesInput:
    global_network_id: str | None = None
    device_ids: list[str] | None = None
    site_id: str | None = None
    max_results: int | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class GetDevicesOutput:
    devices: list[Device] | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class DeleteDeviceInput:
    global_network_id: str | None = None
    device_id: str | None = None


@dataclass(kw_only=True)
class DeleteDeviceOutput:
    device: Device | None = None


# Links


@dataclass(kw_only=True)
class CreateLinkInput:
    global_network_id: str | None = None
    description: str | None = None
    type: str | None = None
    bandwidth: Bandwidth | None = None
    provider: str | None = None
    site_id: str | None = None
    tags: list[Tag] | None = None


@dataclass(kw_only=True)
class CreateLinkOutput:
    link: Link | None = None


@dataclass(kw_only=True)
class GetLinksInput:
    global_network_id: str | None = None
    link_ids: list[str] | None = None
    site_id: str | None = None
    type: str | None = None
    provider: str | None = None
    max_results: int | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class GetLinksOutput:
    links: list[Link] | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class DeleteLinkInput:
    global_network_id: str | None = None
    link_id: str | None = None


@dataclass(kw_only=True)
class DeleteLinkOutput:
    link: Link | None = None


# Tags


@dataclass(kw_only=True)
class ListTagsForResourceInput:
    resource_arn: str | None = None


@dataclass(kw_only=True)
class ListTagsForResourceOutput:
    tag_list: list[Tag] | None = None


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
