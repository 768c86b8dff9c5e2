from __future__ import annotations

from metsmeta.mets.descriptive import (
    extract_classifications,
    extract_genres,
    extract_identifiers,
    extract_languages,
    meaningful_values,
)
from metsmeta.mets.models import LanguageMetadata, MetsIdentifier


def test_identifiers_default_missing_type_to_unknown(complete_mets) -> None:
    identifiers = extract_identifiers(complete_mets, "resourceId")

    assert identifiers == [
        MetsIdentifier(
            resource_id="resourceId",
            type="purl",
            value="http://resolver.staatsbibliothek-berlin.de/SBB0000A1B200000000",
        ),
        MetsIdentifier(resource_id="resourceId", type="unknown", value="urn:nbn:de:kobv:b4-200905192329"),
    ]


def test_identifiers_are_not_filtered(build_mets) -> None:
    document = build_mets(mods="<mods:identifier type='local'> </mods:identifier><mods:identifier type=''>x</mods:identifier>")

    identifiers = extract_identifiers(document, "resourceId")

    assert [(item.type, item.value) for item in identifiers] == [("local", " "), ("", "x")]


def test_language_classification_and_genre_drop_noise(complete_mets) -> None:
    languages = extract_languages(complete_mets, "resourceId")
    classifications = extract_classifications(complete_mets, "resourceId")
    genres = extract_genres(complete_mets, "resourceId")

    assert languages == [
        LanguageMetadata(resource_id="resourceId", value="ger"),
        LanguageMetadata(resource_id="resourceId", value="lat"),
    ]
    assert [item.value for item in classifications] == ["Psychologie", "Philosophie"]
    assert [item.value for item in genres] == ["Lehrbuch"]


def test_meaningful_values_keep_order_and_duplicates() -> None:
    assert meaningful_values([" ger ", "x", "", "ger", "  la"]) == ["ger", "ger", "la"]


def test_missing_sections_yield_empty_lists(legacy_mets) -> None:
    assert extract_identifiers(legacy_mets, "legacy") == []
    assert extract_languages(legacy_mets, "legacy") == []
    assert extract_classifications(legacy_mets, "legacy") == []
    assert extract_genres(legacy_mets, "legacy") == []
