#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import Final

from ...client import ServiceClient
from ...operations import OperationSpec
from ...protocols import AWSJSONClientProtocol, ClientProtocol
from .errors import ERRORS
from .models import (
    BatchDetectDominantLanguageInput,
    BatchDetectDominantLanguageOutput,
    BatchDetectEntitiesInput,
    BatchDetectEntitiesOutput,
    BatchDetectKeyPhrasesInput,
    BatchDetectKeyPhrasesOutput,
    BatchDetectSentimentInput,
    BatchDetectSentimentOutput,
    ClassifyDocumentInput,
    ClassifyDocumentOutput,
    ContainsPiiEntitiesInput,
    ContainsPiiEntitiesOutput,
    DescribeEntityRecognizerInput,
    DescribeEntityRecognizerOutput,
    DetectDominantLanguageInput,
    DetectDominantLanguageOutput,
    DetectEntitiesInput,
    DetectEntitiesOutput,
    DetectKeyPhrasesInput,
    DetectKeyPhrasesOutput,
    DetectPiiEntitiesInput,
    DetectPiiEntitiesOutput,
    DetectSentimentInput,
    DetectSentimentOutput,
    DetectSyntaxInput,
    DetectSyntaxOutput,
    ListDocumentClassifiersInput,
    ListDocumentClassifiersOutput,
    ListEntityRecognizersInput,
    ListEntityRecognizersOutput,
    ListTagsForResourceInput,
    ListTagsForResourceOutput,
    TagResourceInput,
    TagResourceOutput,
    UntagResourceInput,
    UntagResourceOutput,
)

TARGET_PREFIX: Final = "Comprehend_20171127"

DETECT_SENTIMENT = OperationSpec(
    name="DetectSentiment",
    input=DetectSentimentInput,
    output=DetectSentimentOutput,
    required=("text", "language_code"),
)
DETECT_DOMINANT_LANGUAGE = OperationSpec(
    name="DetectDominantLanguage",
    input=DetectDominantLanguageInput,
    output=DetectDominantLanguageOutput,
    required=("text",),
)
DETECT_ENTITIES = OperationSpec(
    name="DetectEntities",
    input=DetectEntitiesInput,
    output=DetectEntitiesOutput,
)
DETECT_KEY_PHRASES = OperationSpec(
    name="DetectKeyPhrases",
    input=DetectKeyPhrasesInput,
    output=DetectKeyPhrasesOutput,
    required=("text", "language_code"),
)
DETECT_SYNTAX = OperationSpec(
    name="DetectSyntax",
    input=DetectSyntaxInput,
    output=DetectSyntaxOutput,
    required=("text", "language_code"),
)
DETECT_PII_ENTITIES = OperationSpec(
    name="DetectPiiEntities",
    input=DetectPiiEntitiesInput,
    output=DetectPiiEntitiesOutput,
    required=("text", "language_code"),
)
CONTAINS_PII_ENTITIES = OperationSpec(
    name="ContainsPiiEntities",
    input=ContainsPiiEntitiesInput,
    output=ContainsPiiEntitiesOutput,
    required=("text", "language_code"),
)
CLASSIFY_DOCUMENT = OperationSpec(
    name="ClassifyDocument",
    input=ClassifyDocumentInput,
    output=ClassifyDocumentOutput,
    required=("endpoint_arn",),
)
BATCH_DETECT_SENTIMENT = OperationSpec(
    name="BatchDetectSentiment",
    input=BatchDetectSentimentInput,
    output=BatchDetectSentimentOutput,
    required=("text_list", "language_code"),
)
BATCH_DETECT_DOMINANT_LANGUAGE = OperationSpec(
    name="BatchDetectDominantLanguage",
    input=BatchDetectDominantLanguageInput,
    output=BatchDetectDominantLanguageOutput,
    required=("text_list",),
)
BATCH_DETECT_ENTITIES = OperationSpec(
    name="BatchDetectEntities",
    input=BatchDetectEntitiesInput,
    output=BatchDetectEntitiesOutput,
    required=("text_list", "language_code"),
)
BATCH_DETECT_KEY_PHRASES = OperationSpec(
    name="BatchDetectKeyPhrases",
    input=BatchDetectKeyPhrasesInput,
    output=BatchDetectKeyPhrasesOutput,
    required=("text_list", "language_code"),
)
LIST_ENTITY_RECOGNIZERS = OperationSpec(
    name="ListEntityRecognizers",
    input=ListEntityRecognizersInput,
    output=ListEntityRecognizersOutput,
)
DESCRIBE_ENTITY_RECOGNIZER = OperationSpec(
    name="DescribeEntityRecognizer",
    input=DescribeEntityRecognizerInput,
    output=DescribeEntityRecognizerOutput,
    required=("entity_recognizer_arn",),
)
LIST_DOCUMENT_CLASSIFIERS = OperationSpec(
    name="ListDocumentClassifiers",
    input=ListDocumentClassifiersInput,
    output=ListDocumentClassifiersOutput,
)
LIST_TAGS_FOR_RESOURCE = OperationSpec(
    name="ListTagsForResource",
    input=ListTagsForResourceInput,
    output=ListTagsForResourceOutput,
    required=("resource_arn",),
)
TAG_RESOURCE = OperationSpec(
    name="TagResource",
    input=TagResourceInput,
    output=TagResourceOutput,
    required=("resource_arn", "tags"),
)
UNTAG_RESOURCE = OperationSpec(
    name="UntagResource",
    input=UntagResourceInput,
    output=UntagResourceOutput,
    required=("resource_arn", "tag_keys"),
)


class ComprehendClient(ServiceClient):
    """Client for Amazon Comprehend."""

    endpoint_prefix = "comprehend"
    signing_name = "comprehend"

    def _create_protocol(self) -> ClientProtocol:
        return AWSJSONClientProtocol(
            target_prefix=TARGET_PREFIX, json_version="1.1", errors=ERRORS
        )

    async def detect_sentiment(
        self, input: DetectSentimentInput
    ) -> DetectSentimentOutput:
        """Inspects text and returns the prevailing sentiment."""
        return await self._execute_operation(input, DETECT_SENTIMENT)

    async def detect_dominant_language(
        self, input: DetectDominantLanguageInput
    ) -> DetectDominantLanguageOutput:
        """Determines the dominant language of the input text."""
        return await self._execute_operation(input, DETECT_DOMINANT_LANGUAGE)

    async def detect_entities(
        self, input: DetectEntitiesInput
    ) -> DetectEntitiesOutput:
        """Detects named entities in text or in a document.

        Set ``endpoint_arn`` to use a custom entity recognition model. Without it
        ``language_code`` is required by the service.
        """
        return await self._execute_operation(input, DETECT_ENTITIES)

    async def detect_key_phrases(
        self, input: DetectKeyPhrasesInput
    ) -> DetectKeyPhrasesOutput:
        return await self._execute_operation(input, DETECT_KEY_PHRASES)

    async def detect_syntax(self, input: DetectSyntaxInput) -> DetectSyntaxOutput:
        return await self._execute_operation(input, DETECT_SYNTAX)

    async def detect_pii_entities(
        self, input: DetectPiiEntitiesInput
    ) -> DetectPiiEntitiesOutput:
        return await self._execute_operation(input, DETECT_PII_ENTITIES)

    async def contains_pii_entities(
        self, input: ContainsPiiEntitiesInput
    ) -> ContainsPiiEntitiesOutput:
        return await self._execute_operation(input, CONTAINS_PII_ENTITIES)

    async def classify_document(
        self, input: ClassifyDocumentInput
    ) -> ClassifyDocumentOutput:
        """Classifies a document with a custom classifier endpoint."""
        return await self._execute_operation(input, CLASSIFY_DOCUMENT)

    async def batch_detect_sentiment(
        self, input: BatchDetectSentimentInput
    ) -> BatchDetectSentimentOutput:
        """Inspects a list of documents and returns the sentiment of each.

        Documents that couldn't be processed are reported in ``error_list`` by index.
        """
        return await self._execute_operation(input, BATCH_DETECT_SENTIMENT)

    async def batch_detect_dominant_language(
        self, input: BatchDetectDominantLanguageInput
    ) -> BatchDetectDominantLanguageOutput:
        return await self._execute_operation(input, BATCH_DETECT_DOMINANT_LANGUAGE)

    async def batch_detect_entities(
        self, input: BatchDetectEntitiesInput
    ) -> BatchDetectEntitiesOutput:
        return await self._execute_operation(input, BATCH_DETECT_ENTITIES)

    async def batch_detect_key_phrases(
        self, input: BatchDetectKeyPhrasesInput
    ) -> BatchDetectKeyPhrasesOutput:
        return await self._execute_operation(input, BATCH_DETECT_KEY_PHRASES)

    async def list_entity_recognizers(
        self, input: ListEntityRecognizersInput
    ) -> ListEntityRecognizersOutput:
        return await self._execute_operation(input, LIST_ENTITY_RECOGNIZERS)

    async def describe_entity_recognizer(
        self, input: DescribeEntityRecognizerInput
    ) -> DescribeEntityRecognizerOutput:
        return await self._execute_operation(input, DESCRIBE_ENTITY_RECOGNIZER)

    async def list_document_classifiers(
        self, input: ListDocumentClassifiersInput
    ) -> ListDocumentClassifiersOutput:
        return await self._execute_operation(input, LIST_DOCUMENT_CLASSIFIERS)

    async def list_tags_for_resource(
        self, input: ListTagsForResourceInput
    ) -> ListTagsForResourceOutput:
        return await self._execute_operation(input, LIST_TAGS_FOR_RESOURCE)

    async def tag_resource(self, input: TagResourceInput) -> TagResourceOutput:
        return await self._execute_operation(input, TAG_RESOURCE)

    async def untag_resource(self, input: UntagResourceInput) -> UntagResourceOutput:
        return await self._execute_operation(input, UNTAG_RESOURCE)
