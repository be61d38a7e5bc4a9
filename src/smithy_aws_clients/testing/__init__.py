#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

"""Shared utilities for testing code built on smithy-aws-clients."""

from .mockhttp import MockHTTPClient, MockHTTPClientError
from .utils import json_response

__all__ = (
    "MockHTTPClient",
    "MockHTTPClientError",
    "json_response",
)
