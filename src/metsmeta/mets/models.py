"""Records derived from one METS document."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

UNKNOWN = "unknown"


class UnknownFeatureError(ValueError):
    """A ground-truth state flag is not part of the known feature set."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Unknown ground truth feature: {label!r}")
        self.label = label


class GroundTruthFeature(str, Enum):
    """Page-level ground-truth flags recorded in GT metadata sections.

    Provisional label set; see DESIGN.md before ingesting real GT documents
    in strict mode.
    """

    # image
    BITONAL = "bitonal"
    GRAYSCALE = "grayscale"
    COLOR = "color"
    # typeface
    FRAKTUR = "fraktur"
    ANTIQUA = "antiqua"
    MIXED_TYPEFACES = "mixed_typefaces"
    HANDWRITING = "handwriting"
    # layout
    SINGLE_COLUMN = "single_column"
    MULTI_COLUMN = "multi_column"
    MARGINALIA = "marginalia"
    TABLE = "table"
    ILLUSTRATION = "illustration"
    # condition
    SKEWED = "skewed"
    WARPED = "warped"
    DAMAGED = "damaged"
    BLEED_THROUGH = "bleed_through"
    STAINED = "stained"
    # annotation depth
    REGION_LEVEL = "region_level"
    LINE_LEVEL = "line_level"
    WORD_LEVEL = "word_level"
    GLYPH_LEVEL = "glyph_level"

    @classmethod
    def from_label(cls, label: str) -> "GroundTruthFeature":
        try:
            return cls(label.strip().lower())
        except ValueError:
            raise UnknownFeatureError(label) from None


@dataclass(frozen=True, slots=True)
class MetsFile:
    """One file reference from the METS file section."""

    resource_id: str
    version: int
    file_id: str | None
    mime_type: str | None
    page_id: str | None
    use_label: str | None
    url: str | None

    def to_dict(self) -> dict[str, object]:
        return {
            "resourceId": self.resource_id,
            "version": self.version,
            "fileId": self.file_id,
            "mimeType": self.mime_type,
            "pageId": self.page_id,
            "useLabel": self.use_label,
            "url": self.url,
        }


@dataclass(frozen=True, slots=True)
class MetsProperties:
    """Scalar bibliographic properties of a document."""

    resource_id: str
    title: str | None = None
    sub_title: str | None = None
    year: str | None = None
    license: str | None = None
    author: str | None = None
    no_of_pages: int = 0
    publisher: str | None = None
    physical_description: str | None = None
    ppn: str | None = None


@dataclass(frozen=True, slots=True)
class MetsIdentifier:
    resource_id: str
    type: str
    value: str


@dataclass(frozen=True, slots=True)
class LanguageMetadata:
    resource_id: str
    value: str


@dataclass(frozen=True, slots=True)
class ClassificationMetadata:
    resource_id: str
    value: str


@dataclass(frozen=True, slots=True)
class GenreMetadata:
    resource_id: str
    value: str


@dataclass(frozen=True, slots=True)
class PageMetadata:
    """One ground-truth feature of one page."""

    resource_id: str
    order: int | None
    page_id: str
    feature: GroundTruthFeature


@dataclass(frozen=True, slots=True)
class PageFeatures:
    page_id: str
    order: int | None
    features: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ModsIdentifier:
    type: str
    value: str


@dataclass(frozen=True, slots=True)
class MetsMetadata:
    """Aggregated record handed to storage and presentation."""

    title: str | None = None
    sub_title: str | None = None
    year: str | None = None
    author: str | None = None
    publisher: str | None = None
    license: str | None = None
    no_of_pages: int | None = None
    physical_description: str | None = None
    languages: tuple[str, ...] = ()
    classifications: tuple[str, ...] = ()
    genres: tuple[str, ...] = ()
    pages: tuple[PageFeatures, ...] = field(default_factory=tuple)
    identifiers: tuple[ModsIdentifier, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        """Plain, JSON-compatible representation."""

        return {
            "title": self.title,
            "subTitle": self.sub_title,
            "year": self.year,
            "author": self.author,
            "publisher": self.publisher,
            "license": self.license,
            "noOfPages": self.no_of_pages,
            "physicalDescription": self.physical_description,
            "languages": list(self.languages),
            "classifications": list(self.classifications),
            "genres": list(self.genres),
            "pages": [
                {"pageId": page.page_id, "order": page.order, "features": list(page.features)}
                for page in self.pages
            ],
            "identifiers": [{"type": item.type, "value": item.value} for item in self.identifiers],
        }
