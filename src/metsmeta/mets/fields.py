"""Semantic field keys, their XPath expressions and the namespace bindings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping

from metsmeta.mets.config import ExtractionSettings


class FieldKey(str, Enum):
    """Semantic names of the queries used by the extractors."""

    FILE_GROUPS = "file_groups"
    GROUP_FILES = "group_files"
    PAGE_ID_OF_FILE = "page_id_of_file"
    FILE_LOCATION = "file_location"
    TITLE = "title"
    SUB_TITLE = "sub_title"
    YEAR = "year"
    LICENSE = "license"
    AUTHOR = "author"
    NUMBER_OF_IMAGES = "number_of_images"
    PUBLISHER = "publisher"
    PHYSICAL_DESCRIPTION = "physical_description"
    PPN = "ppn"
    UNIQUE_IDENTIFIER = "unique_identifier"
    LANGUAGE = "language"
    CLASSIFICATION = "classification"
    GENRE = "genre"
    PHYSICAL_MAP = "physical_map"
    PAGE_NODES = "page_nodes"
    GT_FEATURES = "gt_features"
    PAGE_URLS = "page_urls"


@dataclass(frozen=True, slots=True)
class Namespace:
    prefix: str
    uri: str


class NamespaceRegistry:
    """Fixed, ordered prefix bindings used by every query."""

    __slots__ = ("_bindings", "_nsmap")

    def __init__(self, bindings: tuple[Namespace, ...]) -> None:
        self._bindings = bindings
        self._nsmap = {binding.prefix: binding.uri for binding in bindings}

    def __iter__(self) -> Iterator[Namespace]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def uri(self, prefix: str) -> str:
        for binding in self._bindings:
            if binding.prefix == prefix:
                return binding.uri
        raise KeyError(prefix)

    def nsmap(self) -> dict[str, str]:
        """Shared prefix -> URI mapping passed to lxml; callers must not modify it."""

        return self._nsmap

    def as_dict(self) -> dict[str, str]:
        """Return an independent copy of the prefix -> URI mapping."""

        return dict(self._nsmap)


NAMESPACES = NamespaceRegistry(
    (
        Namespace("mets", "http://www.loc.gov/METS/"),
        Namespace("mods", "http://www.loc.gov/mods/v3"),
        Namespace("xlink", "http://www.w3.org/1999/xlink"),
        Namespace("gt", "http://www.ocr-d.de/GT/"),
        Namespace("page2017", "http://schema.primaresearch.org/PAGE/gts/pagecontent/2017-07-15"),
    )
)


def _build_queries(settings: ExtractionSettings) -> dict[FieldKey, str]:
    return {
        FieldKey.FILE_GROUPS: "//mets:fileSec/mets:fileGrp",
        FieldKey.GROUP_FILES: "./mets:file",
        FieldKey.PAGE_ID_OF_FILE: "//mets:div[mets:fptr/@FILEID = $file_id]/@ID",
        FieldKey.FILE_LOCATION: "./mets:FLocat/@xlink:href",
        FieldKey.TITLE: "//mods:mods/mods:titleInfo/mods:title",
        FieldKey.SUB_TITLE: "//mods:mods/mods:titleInfo/mods:subTitle",
        FieldKey.YEAR: "//mods:mods/mods:originInfo/mods:dateIssued",
        FieldKey.LICENSE: "//mods:mods/mods:accessCondition",
        FieldKey.AUTHOR: "//mods:mods/mods:name/mods:displayForm",
        FieldKey.NUMBER_OF_IMAGES: (
            f"//mets:fileSec/mets:fileGrp[@USE='{settings.image_file_group}']/mets:file"
        ),
        FieldKey.PUBLISHER: "//mods:mods/mods:originInfo/mods:publisher",
        FieldKey.PHYSICAL_DESCRIPTION: "//mods:mods/mods:physicalDescription/mods:extent",
        FieldKey.PPN: "//mods:mods/mods:recordInfo/mods:recordIdentifier",
        FieldKey.UNIQUE_IDENTIFIER: "//mods:mods/mods:identifier",
        FieldKey.LANGUAGE: "//mods:mods/mods:language/mods:languageTerm",
        FieldKey.CLASSIFICATION: "//mods:mods/mods:classification",
        FieldKey.GENRE: "//mods:mods/mods:genre",
        FieldKey.PHYSICAL_MAP: "//mets:structMap[@TYPE='PHYSICAL']",
        FieldKey.PAGE_NODES: "./mets:div/mets:div[@TYPE='page']",
        FieldKey.GT_FEATURES: (
            "//mets:dmdSec[@ID = $dmd_id]/mets:mdWrap[@OTHERMDTYPE='GT']"
            "/mets:xmlData/gt:gt/gt:state/@prop"
        ),
        FieldKey.PAGE_URLS: (
            f"//mets:file[@MIMETYPE='{settings.page_mimetype}']/mets:FLocat/@xlink:href"
        ),
    }


class FieldMap:
    """Read-only mapping of semantic keys to XPath expressions.

    Built once per settings value; extractors only ever read from it.
    """

    __slots__ = ("_queries", "_namespaces")

    def __init__(self, queries: Mapping[FieldKey, str], namespaces: NamespaceRegistry = NAMESPACES) -> None:
        missing = [key.name for key in FieldKey if key not in queries]
        if missing:
            raise ValueError(f"Field map is missing queries for: {', '.join(missing)}")
        self._queries = MappingProxyType(dict(queries))
        self._namespaces = namespaces

    @classmethod
    def from_settings(cls, settings: ExtractionSettings) -> "FieldMap":
        return cls(_build_queries(settings))

    def resolve(self, key: FieldKey) -> str:
        return self._queries[key]

    def namespaces(self) -> NamespaceRegistry:
        return self._namespaces

    def items(self) -> Iterator[tuple[FieldKey, str]]:
        return iter(self._queries.items())


DEFAULT_FIELD_MAP = FieldMap.from_settings(ExtractionSettings())
