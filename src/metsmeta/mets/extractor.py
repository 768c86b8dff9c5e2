"""Single entrypoint bundling all METS extraction operations."""

from __future__ import annotations

import logging

from metsmeta.mets.aggregate import aggregate
from metsmeta.mets.config import ExtractionSettings
from metsmeta.mets.descriptive import (
    extract_classifications,
    extract_genres,
    extract_identifiers,
    extract_languages,
)
from metsmeta.mets.fields import DEFAULT_FIELD_MAP, FieldMap
from metsmeta.mets.files import extract_mets_files
from metsmeta.mets.ground_truth import extract_ground_truth_features, extract_page_urls
from metsmeta.mets.models import (
    ClassificationMetadata,
    GenreMetadata,
    LanguageMetadata,
    MetsFile,
    MetsIdentifier,
    MetsMetadata,
    MetsProperties,
    PageMetadata,
)
from metsmeta.mets.properties import extract_properties
from metsmeta.mets.query import QueryContext, QueryExecutor

logger = logging.getLogger(__name__)


class MetsExtractor:
    """Run the extractors against one field map and query executor."""

    def __init__(
        self,
        field_map: FieldMap = DEFAULT_FIELD_MAP,
        executor: QueryExecutor | None = None,
        *,
        strict_features: bool = True,
    ) -> None:
        self._field_map = field_map
        self._executor = executor or QueryExecutor()
        self._strict_features = strict_features

    @classmethod
    def from_settings(cls, settings: ExtractionSettings) -> "MetsExtractor":
        return cls(FieldMap.from_settings(settings), strict_features=settings.strict_features)

    @property
    def field_map(self) -> FieldMap:
        return self._field_map

    def extract_files(self, document: QueryContext, resource_id: str, version: int) -> list[MetsFile]:
        return extract_mets_files(
            document, resource_id, version, field_map=self._field_map, executor=self._executor
        )

    def extract_properties(self, document: QueryContext, resource_id: str) -> MetsProperties:
        return extract_properties(document, resource_id, field_map=self._field_map, executor=self._executor)

    def extract_identifiers(self, document: QueryContext, resource_id: str) -> list[MetsIdentifier]:
        return extract_identifiers(document, resource_id, field_map=self._field_map, executor=self._executor)

    def extract_languages(self, document: QueryContext, resource_id: str) -> list[LanguageMetadata]:
        return extract_languages(document, resource_id, field_map=self._field_map, executor=self._executor)

    def extract_classifications(self, document: QueryContext, resource_id: str) -> list[ClassificationMetadata]:
        return extract_classifications(
            document, resource_id, field_map=self._field_map, executor=self._executor
        )

    def extract_genres(self, document: QueryContext, resource_id: str) -> list[GenreMetadata]:
        return extract_genres(document, resource_id, field_map=self._field_map, executor=self._executor)

    def extract_ground_truth_features(self, document: QueryContext, resource_id: str) -> list[PageMetadata]:
        return extract_ground_truth_features(
            document,
            resource_id,
            field_map=self._field_map,
            executor=self._executor,
            strict_features=self._strict_features,
        )

    def extract_page_urls(self, document: QueryContext) -> list[str]:
        return extract_page_urls(document, field_map=self._field_map, executor=self._executor)

    def extract_metadata(self, document: QueryContext, resource_id: str) -> MetsMetadata:
        """Run every descriptive extractor and aggregate the results."""

        logger.info("Extract metadata from METS document. resource_id=%s", resource_id)
        return aggregate(
            self.extract_properties(document, resource_id),
            languages=self.extract_languages(document, resource_id),
            classifications=self.extract_classifications(document, resource_id),
            genres=self.extract_genres(document, resource_id),
            pages=self.extract_ground_truth_features(document, resource_id),
            identifiers=self.extract_identifiers(document, resource_id),
        )
