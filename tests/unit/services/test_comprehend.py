#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import json

import pytest

from smithy_aws_clients.config import Config
from smithy_aws_clients.exceptions import MissingParameterError
from smithy_aws_clients.services.comprehend import ComprehendClient
from smithy_aws_clients.services.comprehend.errors import (
    InvalidRequestException,
    TextSizeLimitExceededException,
)
from smithy_aws_clients.services.comprehend.models import (
    BatchDetectSentimentInput,
    ClassifyDocumentInput,
    DetectSentimentInput,
    SentimentScore,
)
from smithy_aws_clients.testing import MockHTTPClient, json_response


@pytest.fixture
def transport() -> MockHTTPClient:
    return MockHTTPClient()


@pytest.fixture
def client(transport: MockHTTPClient) -> ComprehendClient:
    return ComprehendClient(
        Config(
            transport=transport,
            region="eu-west-1",
            aws_access_key_id="AKID",
            aws_secret_access_key="SECRET",
            endpoint_discovery_enabled=True,
        )
    )


async def test_detect_sentiment(
    client: ComprehendClient, transport: MockHTTPClient
) -> None:
    json_response(
        transport,
        {
            "Sentiment": "POSITIVE",
            "SentimentScore": {
                "Positive": 0.99,
                "Negative": 0.001,
                "Neutral": 0.008,
                "Mixed": 0,
            },
        },
    )

    output = await client.detect_sentiment(
        DetectSentimentInput(text="I love this product", language_code="en")
    )

    assert output.sentiment == "POSITIVE"
    assert output.sentiment_score == SentimentScore(
        positive=0.99, negative=0.001, neutral=0.008, mixed=0.0
    )

    request = transport.captured_requests[0]
    assert request.destination.host == "comprehend.eu-west-1.amazonaws.com"
    assert request.fields["X-Amz-Target"].as_string() == (
        "Comprehend_20171127.DetectSentiment"
    )
    assert request.fields["Content-Type"].as_string() == "application/x-amz-json-1.1"
    assert json.loads(request.body) == {
        "Text": "I love this product",
        "LanguageCode": "en",
    }


async def test_discovery_setting_is_ignored(
    client: ComprehendClient, transport: MockHTTPClient
) -> None:
    json_response(transport, {"Sentiment": "NEUTRAL"})

    await client.detect_sentiment(DetectSentimentInput(text="ok", language_code="en"))

    assert transport.call_count == 1


async def test_missing_language_code(
    client: ComprehendClient, transport: MockHTTPClient
) -> None:
    with pytest.raises(MissingParameterError, match=r"\[LanguageCode\]"):
        await client.detect_sentiment(DetectSentimentInput(text="hello"))
    assert transport.call_count == 0


async def test_classify_document_bytes(
    client: ComprehendClient, transport: MockHTTPClient
) -> None:
    json_response(transport, {"Classes": [{"Name": "spam", "Score": 0.9}]})

    await client.classify_document(
        ClassifyDocumentInput(
            endpoint_arn="arn:aws:comprehend:eu-west-1:123456789012:document-classifier-endpoint/spam",
            document_bytes=b"%PDF",
        )
    )

    body = json.loads(transport.captured_requests[0].body)
    assert body["Bytes"] == "JVBERg=="
    assert "DocumentBytes" not in body


async def test_batch_detect_sentiment_partial_failure(
    client: ComprehendClient, transport: MockHTTPClient
) -> None:
    json_response(
        transport,
        {
            "ResultList": [{"Index": 0, "Sentiment": "NEGATIVE"}],
            "ErrorList": [
                {
                    "Index": 1,
                    "ErrorCode": "INTERNAL_SERVER_ERROR",
                    "ErrorMessage": "Unknown error",
                }
            ],
        },
    )

    output = await client.batch_detect_sentiment(
        BatchDetectSentimentInput(text_list=["bad", "???"], language_code="en")
    )

    assert [result.sentiment for result in output.result_list or []] == ["NEGATIVE"]
    assert [error.index for error in output.error_list or []] == [1]


async def test_invalid_request(
    client: ComprehendClient, transport: MockHTTPClient
) -> None:
    json_response(
        transport,
        {
            "__type": "InvalidRequestException",
            "Message": "Invalid document",
            "Reason": "INVALID_DOCUMENT",
            "Detail": {"Reason": "UNSUPPORTED_DOC_TYPE"},
        },
        status=400,
    )

    with pytest.raises(InvalidRequestException) as exc_info:
        await client.detect_sentiment(DetectSentimentInput(text="x", language_code="en"))

    assert exc_info.value.reason == "INVALID_DOCUMENT"
    assert exc_info.value.detail == {"Reason": "UNSUPPORTED_DOC_TYPE"}


async def test_text_size_limit(
    client: ComprehendClient, transport: MockHTTPClient
) -> None:
    json_response(
        transport,
        {"__type": "TextSizeLimitExceededException", "Message": "Too long"},
        status=400,
    )

    with pytest.raises(TextSizeLimitExceededException):
        await client.detect_sentiment(
            DetectSentimentInput(text="x" * 6000, language_code="en")
        )
