"""Compose extracted records into one metadata record."""

from __future__ import annotations

from typing import Sequence

from metsmeta.mets.models import (
    ClassificationMetadata,
    GenreMetadata,
    LanguageMetadata,
    MetsIdentifier,
    MetsMetadata,
    MetsProperties,
    ModsIdentifier,
    PageFeatures,
    PageMetadata,
)


def group_pages(pages: Sequence[PageMetadata]) -> tuple[PageFeatures, ...]:
    """Group feature records by page id, in order of first occurrence."""

    orders: dict[str, int | None] = {}
    features: dict[str, list[str]] = {}
    for page in pages:
        if page.page_id not in features:
            orders[page.page_id] = page.order
            features[page.page_id] = []
        features[page.page_id].append(page.feature.value)

    return tuple(
        PageFeatures(page_id=page_id, order=orders[page_id], features=tuple(labels))
        for page_id, labels in features.items()
    )


def aggregate(
    properties: MetsProperties | None,
    languages: Sequence[LanguageMetadata] | None = None,
    classifications: Sequence[ClassificationMetadata] | None = None,
    genres: Sequence[GenreMetadata] | None = None,
    pages: Sequence[PageMetadata] | None = None,
    identifiers: Sequence[MetsIdentifier] | None = None,
) -> MetsMetadata:
    """Merge properties and per-category records into a :class:`MetsMetadata`.

    Missing inputs are not errors: absent properties leave the scalar fields
    unset and absent lists produce empty collections.
    """

    scalars: dict[str, object] = {}
    if properties is not None:
        scalars = {
            "title": properties.title,
            "sub_title": properties.sub_title,
            "year": properties.year,
            "author": properties.author,
            "publisher": properties.publisher,
            "license": properties.license,
            "no_of_pages": properties.no_of_pages,
            "physical_description": properties.physical_description,
        }

    return MetsMetadata(
        **scalars,
        languages=tuple(item.value for item in languages or ()),
        classifications=tuple(item.value for item in classifications or ()),
        genres=tuple(item.value for item in genres or ()),
        pages=group_pages(pages or ()),
        identifiers=tuple(ModsIdentifier(type=item.type, value=item.value) for item in identifiers or ()),
    )
