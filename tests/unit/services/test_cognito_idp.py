#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import json

import pytest

from smithy_aws_clients.config import Config
from smithy_aws_clients.exceptions import SmithyIdentityError
from smithy_aws_clients.services.cognito_idp import CognitoIdentityProviderClient
from smithy_aws_clients.services.cognito_idp.errors import (
    InvalidParameterException,
    NotAuthorizedException,
)
from smithy_aws_clients.services.cognito_idp.models import (
    AdminGetUserInput,
    AttributeType,
    InitiateAuthInput,
)
from smithy_aws_clients.testing import MockHTTPClient, json_response

AUTH_RESULT = {
    "AuthenticationResult": {
        "AccessToken": "access-token",
        "ExpiresIn": 3600,
        "TokenType": "Bearer",
        "RefreshToken": "refresh-token",
        "IdToken": "id-token",
    },
    "ChallengeParameters": {},
}


def initiate_auth_input() -> InitiateAuthInput:
    return InitiateAuthInput(
        auth_flow="USER_PASSWORD_AUTH",
        client_id="client",
        auth_parameters={"USERNAME": "jane", "PASSWORD": "hunter2"},
    )


async def test_initiate_auth_is_unsigned() -> None:
    transport = MockHTTPClient()
    json_response(transport, AUTH_RESULT)
    client = CognitoIdentityProviderClient(
        Config(transport=transport, region="us-east-1")
    )

    output = await client.initiate_auth(initiate_auth_input())

    result = output.authentication_result
    assert result is not None
    assert result.access_token == "access-token"
    assert result.expires_in == 3600
    assert "access-token" not in repr(result)

    request = transport.captured_requests[0]
    assert "Authorization" not in request.fields
    assert request.destination.host == "cognito-idp.us-east-1.amazonaws.com"
    assert request.fields["X-Amz-Target"].as_string() == (
        "AWSCognitoIdentityProviderService.InitiateAuth"
    )
    assert request.fields["Content-Type"].as_string() == "application/x-amz-json-1.1"
    assert json.loads(request.body)["AuthFlow"] == "USER_PASSWORD_AUTH"


async def test_admin_operation_is_signed() -> None:
    transport = MockHTTPClient()
    json_response(
        transport,
        {
            "Username": "jane",
            "UserAttributes": [{"Name": "email", "Value": "jane@example.com"}],
            "UserCreateDate": 1704067200,
            "Enabled": True,
            "UserStatus": "CONFIRMED",
            "MFAOptions": [{"DeliveryMedium": "SMS", "AttributeName": "phone_number"}],
            "UserMFASettingList": ["SMS_MFA"],
        },
    )
    client = CognitoIdentityProviderClient(
        Config(
            transport=transport,
            region="us-east-1",
            aws_access_key_id="AKID",
            aws_secret_access_key="SECRET",
        )
    )

    output = await client.admin_get_user(
        AdminGetUserInput(user_pool_id="us-east-1_abc", username="jane")
    )

    assert output.user_attributes == [AttributeType(name="email", value="jane@example.com")]
    assert output.mfa_options is not None
    assert output.mfa_options[0].delivery_medium == "SMS"
    assert output.user_mfa_setting_list == ["SMS_MFA"]

    authorization = transport.captured_requests[0].fields["Authorization"].as_string()
    assert "/us-east-1/cognito-idp/aws4_request" in authorization


async def test_admin_operation_without_credentials() -> None:
    transport = MockHTTPClient()
    client = CognitoIdentityProviderClient(
        Config(transport=transport, region="us-east-1")
    )

    with pytest.raises(SmithyIdentityError):
        await client.admin_get_user(
            AdminGetUserInput(user_pool_id="us-east-1_abc", username="jane")
        )
    assert transport.call_count == 0


async def test_not_authorized() -> None:
    transport = MockHTTPClient()
    json_response(
        transport,
        {"__type": "NotAuthorizedException", "message": "Incorrect username or password."},
        status=400,
    )
    client = CognitoIdentityProviderClient(
        Config(transport=transport, region="us-east-1")
    )

    with pytest.raises(NotAuthorizedException) as exc_info:
        await client.initiate_auth(initiate_auth_input())

    assert exc_info.value.message == "Incorrect username or password."


async def test_invalid_parameter_reason_code() -> None:
    transport = MockHTTPClient()
    json_response(
        transport,
        {
            "__type": "InvalidParameterException",
            "message": "Invalid flow",
            "ReasonCode": "INVALID_FLOW",
        },
        status=400,
    )
    client = CognitoIdentityProviderClient(
        Config(transport=transport, region="us-east-1")
    )

    with pytest.raises(InvalidParameterException) as exc_info:
        await client.initiate_auth(initiate_auth_input())

    assert exc_info.value.reason_code == "INVALID_FLOW"
