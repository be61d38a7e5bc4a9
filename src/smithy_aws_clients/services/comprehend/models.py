#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Structures


@dataclass(kw_only=True)
class SentimentScore:
    positive: float | None = None
    negative: float | None = None
    neutral: float | None = None
    mixed: float | None = None


@dataclass(kw_only=True)
class DominantLanguage:
    language_code: str | None = None
    score: float | None = None


@dataclass(kw_only=True)
class Entity:
    score: float | None = None
    type: str | None = None
    text: str | None = None
    begin_offset: int | None = None
    end_offset: int | None = None


@dataclass(kw_only=True)
class KeyPhrase:
    score: float | None = None
    text: str | None = None
    begin_offset: int | None = None
    end_offset: int | None = None


@dataclass(kw_only=True)
class PartOfSpeechTag:
    tag: str | None = None
    score: float | None = None


@dataclass(kw_only=True)
class SyntaxToken:
    token_id: int | None = None
    text: str | None = None
    begin_offset: int | None = None
    end_offset: int | None = None
    part_of_speech: PartOfSpeechTag | None = None


@dataclass(kw_only=True)
class PiiEntity:
    score: float | None = None
    type: str | None = None
    begin_offset: int | None = None
    end_offset: int | None = None


@dataclass(kw_only=True)
class EntityLabel:
    name: str | None = None
    score: float | None = None


@dataclass(kw_only=True)
class DocumentClass:
    name: str | None = None
    score: float | None = None
    page: int | None = None


@dataclass(kw_only=True)
class DocumentLabel:
    name: str | None = None
    score: float | None = None
    page: int | None = None


@dataclass(kw_only=True)
class BatchItemError:
    index: int | None = None
    error_code: str | None = None
    error_message: str | None = None


@dataclass(kw_only=True)
class BatchDetectSentimentItemResult:
    index: int | None = None
    sentiment: str | None = None
    sentiment_score: SentimentScore | None = None


@dataclass(kw_only=True)
class BatchDetectDominantLanguageItemResult:
    index: int | None = None
    languages: list[DominantLanguage] | None = None


@dataclass(kw_only=True)
class BatchDetectEntitiesItemResult:
    index: int | None = None
    entities: list[Entity] | None = None


@dataclass(kw_only=True)
class BatchDetectKeyPhrasesItemResult:
    index: int | None = None
    key_phrases: list[KeyPhrase] | None = None


@dataclass(kw_only=True)
class Tag:
    key: str | None = None
    value: str | None = None


@dataclass(kw_only=True)
class EntityRecognizerFilter:
    status: str | None = None
    recognizer_name: str | None = None
    submit_time_before: datetime | None = None
    submit_time_after: datetime | None = None


@dataclass(kw_only=True)
class EntityRecognizerProperties:
    entity_recognizer_arn: str | None = None
    language_code: str | None = None
    status: str | None = None
    message: str | None = None
    submit_time: datetime | None = None
    end_time: datetime | None = None
    training_start_time: datetime | None = None
    training_end_time: datetime | None = None
    input_data_config: dict[str, Any] | None = None
    recognizer_metadata: dict[str, Any] | None = None
    data_access_role_arn: str | None = None
    volume_kms_key_id: str | None = None
    version_name: str | None = None
    model_kms_key_id: str | None = None


@dataclass(kw_only=True)
class DocumentClassifierFilter:
    status: str | None = None
    document_classifier_name: str | None = None
    submit_time_before: datetime | None = None
    submit_time_after: datetime | None = None


@dataclass(kw_only=True)
class DocumentClassifierProperties:
    document_classifier_arn: str | None = None
    language_code: str | None = None
    status: str | None = None
    message: str | None = None
    submit_time: datetime | None = None
    end_time: datetime | None = None
    mode: str | None = None
    version_name: str | None = None


# Real-time analysis


@dataclass(kw_only=True)
class DetectSentimentInput:
    text: str | None = None
    language_code: str | None = None


@dataclass(kw_only=True)
class DetectSentimentOutput:
    sentiment: str | None = None
    """``POSITIVE``, ``NEGATIVE``, ``NEUTRAL`` or ``MIXED``."""

    sentiment_score: SentimentScore | None = None


@dataclass(kw_only=True)
class DetectDominantLanguageInput:
    text: str | None = None


@dataclass(kw_only=True)
class DetectDominantLanguageOutput:
    languages: list[DominantLanguage] | None = None


@dataclass(kw_only=True)
class DetectEntitiesInput:
    text: str | None = None
    language_code: str | None = None
    endpoint_arn: str | None = None
    document_bytes: bytes | None = field(default=None, metadata={"name": "Bytes"})
    document_reader_config: dict[str, Any] | None = None


@dataclass(kw_only=True)
class DetectEntitiesOutput:
    entities: list[Entity] | None = None
    document_metadata: dict[str, Any] | None = None
    document_type: list[dict[str, Any]] | None = None
    blocks: list[dict[str, Any]] | None = None
    errors: list[dict[str, Any]] | None = None


@dataclass(kw_only=True)
class DetectKeyPhrasesInput:
    text: str | None = None
    language_code: str | None = None


@dataclass(kw_only=True)
class DetectKeyPhrasesOutput:
    key_phrases: list[KeyPhrase] | None = None


@dataclass(kw_only=True)
class DetectSyntaxInput:
    text: str | None = None
    language_code: str | None = None


@dataclass(kw_only=True)
class DetectSyntaxOutput:
    syntax_tokens: list[SyntaxToken] | None = None


@dataclass(kw_only=True)
class DetectPiiEntitiesInput:
    text: str | None = None
    language_code: str | None = None


@dataclass(kw_only=True)
class DetectPiiEntitiesOutput:
    entities: list[PiiEntity] | None = None


@dataclass(kw_only=True)
class ContainsPiiEntitiesInput:
    text: str | None = None
    language_code: str | None = None


@dataclass(kw_only=True)
class ContainsPiiEntitiesOutput:
    labels: list[EntityLabel] | None = None


@dataclass(kw_only=True)
class ClassifyDocumentInput:
    text: str | None = None
    endpoint_arn: str | None = None
    document_bytes: bytes | None = field(default=None, metadata={"name": "Bytes"})
    document_reader_config: dict[str, Any] | None = None


@dataclass(kw_only=True)
class ClassifyDocumentOutput:
    classes: list[DocumentClass] | None = None
    labels: list[DocumentLabel] | None = None
    document_metadata: dict[str, Any] | None = None
    errors: list[dict[str, Any]] | None = None


# Batch analysis


@dataclass(kw_only=True)
class BatchDetectSentimentInput:
    text_list: list[str] | None = None
    language_code: str | None = None


@dataclass(kw_only=True)
class BatchDetectSentimentOutput:
    result_list: list[BatchDetectSentimentItemResult] | None = None
    error_list: list[BatchItemError] | None = None


@dataclass(kw_only=True)
class BatchDetectDominantLanguageInput:
    text_list: list[str] | None = None


@dataclass(kw_only=True)
class BatchDetectDominantLanguageOutput:
    result_list: list[BatchDetectDominantLanguageItemResult] | None = None
    error_list: list[BatchItemError] | None = None


@dataclass(kw_only=True)
class BatchDetectEntitiesInput:
    text_list: list[str] | None = None
    language_code: str | None = None


@dataclass(kw_only=True)
class BatchDetectEntitiesOutput:
    result_list: list[BatchDetectEntitiesItemResult] | None = None
    error_list: list[BatchItemError] | None = None


@dataclass(kw_only=True)
class BatchDetectKeyPhrasesInput:
    text_list: list[str] | None = None
    language_code: str | None = None


@dataclass(kw_only=True)
class BatchDetectKeyPhrasesOutput:
    result_list: list[BatchDetectKeyPhrasesItemResult] | None = None
    error_list: list[BatchItemError] | None = None


# Custom models


@dataclass(kw_only=True)
class ListEntityRecognizersInput:
    filter: EntityRecognizerFilter | None = None
    next_token: str | None = None
    max_results: int | None = None


@dataclass(kw_only=True)
class ListEntityRecognizersOutput:
    entity_recognizer_properties_list: list[EntityRecognizerProperties] | None = None
    next_token: str | None = None


@dataclass(kw_only=True)
class DescribeEntityRecognizerInput:
    entity_recognizer_arn: str | None = None


@dataclass(kw_only=True)
class DescribeEntityRecognizerOutput:
    entity_recognizer_properties: EntityRecognizerProperties | None = None


@dataclass(kw_only=True)
class ListDocumentClassifiersInput:
    filter: DocumentClassifierFilter | None = None
    next_token: str | None = None
    max_results: int | None = None


@dataclass(kw_only=True)
class ListDocumentClassifiersOutput:
    document_classifier_properties_list: list[DocumentClassifierProperties] | None = (
        None
    )
    next_token: str | None = None


# Tags


@dataclass(kw_only=True)
class ListTagsForResourceInput:
    resource_arn: str | None = None


@dataclass(kw_only=True)
class ListTagsForResourceOutput:
    resource_arn: str | None = None
    tags: list[Tag] | None = None


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
