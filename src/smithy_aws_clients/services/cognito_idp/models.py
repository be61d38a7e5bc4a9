#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(kw_only=True)
class AttributeType:
    name: str | None = None
    value: str | None = None


@dataclass(kw_only=True)
class MFAOptionType:
    delivery_medium: str | None = None
    attribute_name: str | None = None


@dataclass(kw_only=True)
class CodeDeliveryDetailsType:
    destination: str | None = None
    delivery_medium: str | None = None
    attribute_name: str | None = None


@dataclass(kw_only=True)
class NewDeviceMetadataType:
    device_key: str | None = None
    device_group_key: str | None = None


@dataclass(kw_only=True)
class AuthenticationResultType:
    access_token: str | None = field(default=None, repr=False)
    expires_in: int | None = None
    token_type: str | None = None
    refresh_token: str | None = field(default=None, repr=False)
    id_token: str | None = field(default=None, repr=False)
    new_device_metadata: NewDeviceMetadataType | None = None


@dataclass(kw_only=True)
class UserType:
    username: str | None = None
    attributes: list[AttributeType] | None = None
    user_create_date: datetime | None = None
    user_last_modified_date: datetime | None = None
    enabled: bool | None = None
    user_status: str | None = None
    mfa_options: list[MFAOptionType] | None = field(
        default=None, metadata={"name": "MFAOptions"}
    )


@dataclass(kw_only=True)
class UserPoolDescriptionType:
    id: str | None = None
    name: str | None = None
    status: str | None = None
    last_modified_date: datetime | None = None
    creation_date: datetime | None = None


# Authentication


@dataclass(kw_only=True)
class InitiateAuthInput:
    auth_flow: str | None = None
    """For example ``USER_PASSWORD_AUTH`` or ``REFRESH_TOKEN_AUTH``."""

    auth_parameters: dict[str, str] | None = None
    client_metadata: dict[str, str] | None = None
    client_id: str | None = None
    analytics_metadata: dict[str, Any] | None = None
    user_context_data: dict[str, Any] | None = None


@dataclass(kw_only=True)
class InitiateAuthOutput:
    challenge_name: str | None = None
    session: str | None = None
    challenge_parameters: dict[str, str] | None = None
    authentication_result: AuthenticationResultType | None = None


@dataclass(kw_only=True)
class RespondToAuthChallengeInput:
    client_id: str | None = None
    challenge_name: str | None = None
    session: str | None = None
    challenge_responses: dict[str, str] | None = None
    analytics_metadata: dict[str, Any] | None = None
    user_context_data: dict[str, Any] | None = None
    client_metadata: dict[str, str] | None = None


@dataclass(kw_only=True)
class RespondToAuthChallengeOutput:
    challenge_name: str | None = None
    session: str | None = None
    challenge_parameters: dict[str, str] | None = None
    authentication_result: AuthenticationResultType | None = None


@dataclass(kw_only=True)
class AdminInitiateAuthInput:
    user_pool_id: str | None = None
    client_id: str | None = None
    auth_flow: str | None = None
    auth_parameters: dict[str, str] | None = None
    client_metadata: dict[str, str] | None = None
    analytics_metadata: dict[str, Any] | None = None
    context_data: dict[str, Any] | None = None


@dataclass(kw_only=True)
class AdminInitiateAuthOutput:
    challenge_name: str | None = None
    session: str | None = None
    challenge_parameters: dict[str, str] | None = None
    authentication_result: AuthenticationResultType | None = None


@dataclass(kw_only=True)
class GlobalSignOutInput:
    access_token: str | None = field(default=None, repr=False)


@dataclass(kw_only=True)
class GlobalSignOutOutput:
    pass


@dataclass(kw_only=True)
class RevokeTokenInput:
    token: str | None = field(default=None, repr=False)
    client_id: str | None = None
    client_secret: str | None = field(default=None, repr=False)


@dataclass(kw_only=True)
class RevokeTokenOutput:
    pass


# Sign-up and passwords


@dataclass(kw_only=True)
class SignUpInput:
    client_id: str | None = None
    secret_hash: str | None = None
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    user_attributes: list[AttributeType] | None = None
    validation_data: list[AttributeType] | None = None
    analytics_metadata: dict[str, Any] | None = None
    user_context_data: dict[str, Any] | None = None
    client_metadata: dict[str, str] | None = None


@dataclass(kw_only=True)
class SignUpOutput:
    user_confirmed: bool | None = None
    code_delivery_details: CodeDeliveryDetailsType | None = None
    user_sub: str | None = None


@dataclass(kw_only=True)
class ConfirmSignUpInput:
    client_id: str | None = None
    secret_hash: str | None = None
    username: str | None = None
    confirmation_code: str | None = None
    force_alias_creation: bool | None = None
    analytics_metadata: dict[str, Any] | None = None
    user_context_data: dict[str, Any] | None = None
    client_metadata: dict[str, str] | None = None


@dataclass(kw_only=True)
class ConfirmSignUpOutput:
    pass


@dataclass(kw_only=True)
class ResendConfirmationCodeInput:
    client_id: str | None = None
    secret_hash: str | None = None
    username: str | None = None
    client_metadata: dict[str, str] | None = None


@dataclass(kw_only=True)
class ResendConfirmationCodeOutput:
    code_delivery_details: CodeDeliveryDetailsType | None = None


@dataclass(kw_only=True)
class ForgotPasswordInput:
    client_id: str | None = None
    secret_hash: str | None = None
    username: str | None = None
    client_metadata: dict[str, str] | None = None


@dataclass(kw_only=True)
class ForgotPasswordOutput:
    code_delivery_details: CodeDeliveryDetailsType | None = None


@dataclass(kw_only=True)
class ConfirmForgotPasswordInput:
    client_id: str | None = None
    secret_hash: str | None = None
    username: str | None = None
    confirmation_code: str | None = None
    password: str | None = field(default=None, repr=False)
    client_metadata: dict[str, str] | None = None


@dataclass(kw_only=True)
class ConfirmForgotPasswordOutput:
    pass


@dataclass(kw_only=True)
class ChangePasswordInput:
    previous_password: str | None = field(default=None, repr=False)
    proposed_password: str | None = field(default=None, repr=False)
    access_token: str | None = field(default=None, repr=False)


@dataclass(kw_only=True)
class ChangePasswordOutput:
    pass


# Users


@dataclass(kw_only=True)
class GetUserInput:
    access_token: str | None = field(default=None, repr=False)


@dataclass(kw_only=True)
class GetUserOutput:
    username: str | None = None
    user_attributes: list[AttributeType] | None = None
    mfa_options: list[MFAOptionType] | None = field(
        default=None, metadata={"name": "MFAOptions"}
    )
    preferred_mfa_setting: str | None = None
    user_mfa_setting_list: list[str] | None = field(
        default=None, metadata={"name": "UserMFASettingList"}
    )


@dataclass(kw_only=True)
class DeleteUserInput:
    access_token: str | None = field(default=None, repr=False)


@dataclass(kw_only=True)
class DeleteUserOutput:
    pass


@dataclass(kw_only=True)
class AdminGetUserInput:
    user_pool_id: str | None = None
    username: str | None = None


@dataclass(kw_only=True)
class AdminGetUserOutput:
    username: str | None = None
    user_attributes: list[AttributeType] | None = None
    user_create_date: datetime | None = None
    user_last_modified_date: datetime | None = None
    enabled: bool | None = None
    user_status: str | None = None
    mfa_options: list[MFAOptionType] | None = field(
        default=None, metadata={"name": "MFAOptions"}
    )
    preferred_mfa_setting: str | None = None
    user_mfa_setting_list: list[str] | None = field(
        default=None, metadata={"name": "UserMFASettingList"}
    )


@dataclass(kw_only=True)
class AdminCreateUserInput:
    user_pool_id: str | None = None
    username: str | None = None
    user_attributes: list[AttributeType] | None = None
    validation_data: list[AttributeType] | None = None
    temporary_password: str | None = field(default=None, repr=False)
    force_alias_creation: bool | None = None
    message_action: str | None = None
    desired_delivery_mediums: list[str] | None = None
    client_metadata: dict[str, str] | None = None


@dataclass(kw_only=True)
class AdminCreateUserOutput:
    user: UserType | None = None


@dataclass(kw_only=True)
class AdminDeleteUserInput:
    user_pool_id: str | None = None
    username: str | None = None


@dataclass(kw_only=True)
class AdminDeleteUserOutput:
    pass


@dataclass(kw_only=True)
class ListUsersInput:
    user_pool_id: str | None = None
    attributes_to_get: list[str] | None = None
    limit: int | None = None
    pagination_token: str | None = None
    filter: str | None = None
    """For example ``email ^= "jane"``."""


@dataclass(kw_only=True)
class ListUsersOutput:
    users: list[UserType] | None = None
    pagination_token: str | None = None


# User pools


@dataclass(kw_only=True)
class ListUserPoolsInput:
    next_token: str | None = None
    max_results: int | None = None


@dataclass(kw_only=True)
class ListUserPoolsOutput:
    user_pools: list[UserPoolDescriptionType] | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class DescribeUserPoolInput:
    user_pool_id: str | None = None


@dataclass(kw_only=True)
class DescribeUserPoolOutput:
    user_pool: dict[str, Any] | None = None
