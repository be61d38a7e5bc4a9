#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from .client import CognitoIdentityProviderClient

__all__ = ("CognitoIdentityProviderClient",)
