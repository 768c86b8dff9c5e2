"""Identifier, language, classification and genre records."""

from __future__ import annotations

from typing import Callable, TypeVar

from metsmeta.mets.fields import DEFAULT_FIELD_MAP, FieldKey, FieldMap
from metsmeta.mets.models import (
    UNKNOWN,
    ClassificationMetadata,
    GenreMetadata,
    LanguageMetadata,
    MetsIdentifier,
)
from metsmeta.mets.query import QueryContext, QueryExecutor, element_text

RecordT = TypeVar("RecordT")


def meaningful_values(values: list[str]) -> list[str]:
    """Trim values and drop one-character noise, keeping document order."""

    trimmed = (value.strip() for value in values)
    return [value for value in trimmed if len(value) > 1]


def extract_identifiers(
    document: QueryContext,
    resource_id: str,
    *,
    field_map: FieldMap = DEFAULT_FIELD_MAP,
    executor: QueryExecutor | None = None,
) -> list[MetsIdentifier]:
    executor = executor or QueryExecutor()
    nodes = executor.nodes(document, field_map.resolve(FieldKey.UNIQUE_IDENTIFIER), field_map.namespaces())
    identifiers: list[MetsIdentifier] = []
    for node in nodes:
        id_type = executor.attribute(node, "type")
        identifiers.append(
            MetsIdentifier(
                resource_id=resource_id,
                type=UNKNOWN if id_type is None else id_type,
                value=element_text(node),
            )
        )
    return identifiers


def _extract_values(
    document: QueryContext,
    resource_id: str,
    key: FieldKey,
    factory: Callable[[str, str], RecordT],
    field_map: FieldMap,
    executor: QueryExecutor | None,
) -> list[RecordT]:
    executor = executor or QueryExecutor()
    values = executor.values(document, field_map.resolve(key), field_map.namespaces())
    return [factory(resource_id, value) for value in meaningful_values(values)]


def extract_languages(
    document: QueryContext,
    resource_id: str,
    *,
    field_map: FieldMap = DEFAULT_FIELD_MAP,
    executor: QueryExecutor | None = None,
) -> list[LanguageMetadata]:
    return _extract_values(document, resource_id, FieldKey.LANGUAGE, LanguageMetadata, field_map, executor)


def extract_classifications(
    document: QueryContext,
    resource_id: str,
    *,
    field_map: FieldMap = DEFAULT_FIELD_MAP,
    executor: QueryExecutor | None = None,
) -> list[ClassificationMetadata]:
    return _extract_values(
        document, resource_id, FieldKey.CLASSIFICATION, ClassificationMetadata, field_map, executor
    )


def extract_genres(
    document: QueryContext,
    resource_id: str,
    *,
    field_map: FieldMap = DEFAULT_FIELD_MAP,
    executor: QueryExecutor | None = None,
) -> list[GenreMetadata]:
    return _extract_values(document, resource_id, FieldKey.GENRE, GenreMetadata, field_map, executor)
