#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import Final

from ...client import ServiceClient
from ...operations import AuthType, OperationSpec
from ...protocols import AWSJSONClientProtocol, ClientProtocol
from .errors import ERRORS
from .models import (
    AdminCreateUserInput,
    AdminCreateUserOutput,
    AdminDeleteUserInput,
    AdminDeleteUserOutput,
    AdminGetUserInput,
    AdminGetUserOutput,
    AdminInitiateAuthInput,
    AdminInitiateAuthOutput,
    ChangePasswordInput,
    ChangePasswordOutput,
    ConfirmForgotPasswordInput,
    ConfirmForgotPasswordOutput,
    ConfirmSignUpInput,
    ConfirmSignUpOutput,
    DeleteUserInput,
    DeleteUserOutput,
    DescribeUserPoolInput,
    DescribeUserPoolOutput,
    ForgotPasswordInput,
    ForgotPasswordOutput,
    GetUserInput,
    GetUserOutput,
    GlobalSignOutInput,
    GlobalSignOutOutput,
    InitiateAuthInput,
    InitiateAuthOutput,
    ListUserPoolsInput,
    ListUserPoolsOutput,
    ListUsersInput,
    ListUsersOutput,
    ResendConfirmationCodeInput,
    ResendConfirmationCodeOutput,
    RespondToAuthChallengeInput,
    RespondToAuthChallengeOutput,
    RevokeTokenInput,
    RevokeTokenOutput,
    SignUpInput,
    SignUpOutput,
)

TARGET_PREFIX: Final = "AWSCognitoIdentityProviderService"

# Operations called by end users are authorized by their tokens or app client, so
# their requests are sent unsigned.
_ANONYMOUS = AuthType.ANONYMOUS

INITIATE_AUTH = OperationSpec(
    name="InitiateAuth",
    input=InitiateAuthInput,
    output=InitiateAuthOutput,
    required=("auth_flow", "client_id"),
    auth=_ANONYMOUS,
)
RESPOND_TO_AUTH_CHALLENGE = OperationSpec(
    name="RespondToAuthChallenge",
    input=RespondToAuthChallengeInput,
    output=RespondToAuthChallengeOutput,
    required=("client_id", "challenge_name"),
    auth=_ANONYMOUS,
)
SIGN_UP = OperationSpec(
    name="SignUp",
    input=SignUpInput,
    output=SignUpOutput,
    required=("client_id", "username", "password"),
    auth=_ANONYMOUS,
)
CONFIRM_SIGN_UP = OperationSpec(
    name="ConfirmSignUp",
    input=ConfirmSignUpInput,
    output=ConfirmSignUpOutput,
    required=("client_id", "username", "confirmation_code"),
    auth=_ANONYMOUS,
)
RESEND_CONFIRMATION_CODE = OperationSpec(
    name="ResendConfirmationCode",
    input=ResendConfirmationCodeInput,
    output=ResendConfirmationCodeOutput,
    required=("client_id", "username"),
    auth=_ANONYMOUS,
)
FORGOT_PASSWORD = OperationSpec(
    name="ForgotPassword",
    input=ForgotPasswordInput,
    output=ForgotPasswordOutput,
    required=("client_id", "username"),
    auth=_ANONYMOUS,
)
CONFIRM_FORGOT_PASSWORD = OperationSpec(
    name="ConfirmForgotPassword",
    input=ConfirmForgotPasswordInput,
    output=ConfirmForgotPasswordOutput,
    required=("client_id", "username", "confirmation_code", "password"),
    auth=_ANONYMOUS,
)
CHANGE_PASSWORD = OperationSpec(
    name="ChangePassword",
    input=ChangePasswordInput,
    output=ChangePasswordOutput,
    required=("previous_password", "proposed_password", "access_token"),
    auth=_ANONYMOUS,
)
GET_USER = OperationSpec(
    name="GetUser",
    input=GetUserInput,
    output=GetUserOutput,
    required=("access_token",),
    auth=_ANONYMOUS,
)
DELETE_USER = OperationSpec(
    name="DeleteUser",
    input=DeleteUserInput,
    output=DeleteUserOutput,
    required=("access_token",),
    auth=_ANONYMOUS,
)
GLOBAL_SIGN_OUT = OperationSpec(
    name="GlobalSignOut",
    input=GlobalSignOutInput,
    output=GlobalSignOutOutput,
    required=("access_token",),
    auth=_ANONYMOUS,
)
REVOKE_TOKEN = OperationSpec(
    name="RevokeToken",
    input=RevokeTokenInput,
    output=RevokeTokenOutput,
    required=("token", "client_id"),
    auth=_ANONYMOUS,
)

ADMIN_INITIATE_AUTH = OperationSpec(
    name="AdminInitiateAuth",
    input=AdminInitiateAuthInput,
    output=AdminInitiateAuthOutput,
    required=("user_pool_id", "client_id", "auth_flow"),
)
ADMIN_GET_USER = OperationSpec(
    name="AdminGetUser",
    input=AdminGetUserInput,
    output=AdminGetUserOutput,
    required=("user_pool_id", "username"),
)
ADMIN_CREATE_USER = OperationSpec(
    name="AdminCreateUser",
    input=AdminCreateUserInput,
    output=AdminCreateUserOutput,
    required=("user_pool_id", "username"),
)
ADMIN_DELETE_USER = OperationSpec(
    name="AdminDeleteUser",
    input=AdminDeleteUserInput,
    output=AdminDeleteUserOutput,
    required=("user_pool_id", "username"),
)
LIST_USERS = OperationSpec(
    name="ListUsers",
    input=ListUsersInput,
    output=ListUsersOutput,
    required=("user_pool_id",),
)
LIST_USER_POOLS = OperationSpec(
    name="ListUserPools",
    input=ListUserPoolsInput,
    output=ListUserPoolsOutput,
    required=("max_results",),
)
DESCRIBE_USER_POOL = OperationSpec(
    name="DescribeUserPool",
    input=DescribeUserPoolInput,
    output=DescribeUserPoolOutput,
    required=("user_pool_id",),
)


class CognitoIdentityProviderClient(ServiceClient):
    """Client for Amazon Cognito user pools.

    User-facing operations such as :py:meth:`initiate_auth` don't need AWS
    credentials. Administrative operations are signed with SigV4.
    """

    endpoint_prefix = "cognito-idp"
    signing_name = "cognito-idp"

    def _create_protocol(self) -> ClientProtocol:
        return AWSJSONClientProtocol(
            target_prefix=TARGET_PREFIX, json_version="1.1", errors=ERRORS
        )

    async def initiate_auth(self, input: InitiateAuthInput) -> InitiateAuthOutput:
        """Starts sign-in for a user.

        The output either holds tokens in ``authentication_result``, or names the
        next challenge to answer with :py:meth:`respond_to_auth_challenge`.
        """
        return await self._execute_operation(input, INITIATE_AUTH)

    async def respond_to_auth_challenge(
        self, input: RespondToAuthChallengeInput
    ) -> RespondToAuthChallengeOutput:
        return await self._execute_operation(input, RESPOND_TO_AUTH_CHALLENGE)

    async def sign_up(self, input: SignUpInput) -> SignUpOutput:
        """Registers a user with an app client."""
        return await self._execute_operation(input, SIGN_UP)

    async def confirm_sign_up(
        self, input: ConfirmSignUpInput
    ) -> ConfirmSignUpOutput:
        return await self._execute_operation(input, CONFIRM_SIGN_UP)

    async def resend_confirmation_code(
        self, input: ResendConfirmationCodeInput
    ) -> ResendConfirmationCodeOutput:
        return await self._execute_operation(input, RESEND_CONFIRMATION_CODE)

    async def forgot_password(
        self, input: ForgotPasswordInput
    ) -> ForgotPasswordOutput:
        """Sends a confirmation code for resetting the user's password."""
        return await self._execute_operation(input, FORGOT_PASSWORD)

    async def confirm_forgot_password(
        self, input: ConfirmForgotPasswordInput
    ) -> ConfirmForgotPasswordOutput:
        return await self._execute_operation(input, CONFIRM_FORGOT_PASSWORD)

    async def change_password(
        self, input: ChangePasswordInput
    ) -> ChangePasswordOutput:
        return await self._execute_operation(input, CHANGE_PASSWORD)

    async def get_user(self, input: GetUserInput) -> GetUserOutput:
        """Gets the attributes of the user an access token belongs to."""
        return await self._execute_operation(input, GET_USER)

    async def delete_user(self, input: DeleteUserInput) -> DeleteUserOutput:
        return await self._execute_operation(input, DELETE_USER)

    async def global_sign_out(
        self, input: GlobalSignOutInput
    ) -> GlobalSignOutOutput:
        """Invalidates every token issued to the user."""
        return await self._execute_operation(input, GLOBAL_SIGN_OUT)

    async def revoke_token(self, input: RevokeTokenInput) -> RevokeTokenOutput:
        return await self._execute_operation(input, REVOKE_TOKEN)

    async def admin_initiate_auth(
        self, input: AdminInitiateAuthInput
    ) -> AdminInitiateAuthOutput:
        return await self._execute_operation(input, ADMIN_INITIATE_AUTH)

    async def admin_get_user(self, input: AdminGetUserInput) -> AdminGetUserOutput:
        return await self._execute_operation(input, ADMIN_GET_USER)

    async def admin_create_user(
        self, input: AdminCreateUserInput
    ) -> AdminCreateUserOutput:
        return await self._execute_operation(input, ADMIN_CREATE_USER)

    async def admin_delete_user(
        self, input: AdminDeleteUserInput
    ) -> AdminDeleteUserOutput:
        return await self._execute_operation(input, ADMIN_DELETE_USER)

    async def list_users(self, input: ListUsersInput) -> ListUsersOutput:
        return await self._execute_operation(input, LIST_USERS)

    async def list_user_pools(
        self, input: ListUserPoolsInput
    ) -> ListUserPoolsOutput:
        return await self._execute_operation(input, LIST_USER_POOLS)

    async def describe_user_pool(
        self, input: DescribeUserPoolInput
    ) -> DescribeUserPoolOutput:
        return await self._execute_operation(input, DESCRIBE_USER_POOL)
