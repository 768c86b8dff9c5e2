"""METS/MODS extraction interfaces."""

from .aggregate import aggregate
from .config import ExtractionSettings
from .document import MetsDocumentError, load_mets
from .extractor import MetsExtractor
from .fields import DEFAULT_FIELD_MAP, NAMESPACES, FieldKey, FieldMap, NamespaceRegistry
from .models import GroundTruthFeature, MetsMetadata, UnknownFeatureError
from .query import QueryError, QueryExecutor

__all__ = [
    "DEFAULT_FIELD_MAP",
    "NAMESPACES",
    "ExtractionSettings",
    "FieldKey",
    "FieldMap",
    "GroundTruthFeature",
    "MetsDocumentError",
    "MetsExtractor",
    "MetsMetadata",
    "NamespaceRegistry",
    "QueryError",
    "QueryExecutor",
    "UnknownFeatureError",
    "aggregate",
    "load_mets",
]
