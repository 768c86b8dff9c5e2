from __future__ import annotations

import dataclasses

import pytest

from metsmeta.mets.config import ExtractionSettings
from metsmeta.mets.extractor import MetsExtractor
from metsmeta.mets.models import GroundTruthFeature, UnknownFeatureError


def test_end_to_end_metadata_reproduces_document_values(complete_mets) -> None:
    extractor = MetsExtractor()

    metadata = extractor.extract_metadata(complete_mets, "resourceId")

    assert metadata.title == "Grundriss der Psychologie"
    assert metadata.sub_title == ""
    assert metadata.author == "Wilhelm Wundt"
    assert metadata.publisher == "Engelmann"
    assert metadata.year == "1896"
    assert metadata.physical_description == "XVI, 392 S."
    assert "OCR-D" in metadata.license
    assert metadata.no_of_pages == 4
    assert metadata.languages == ("ger", "lat")
    assert metadata.classifications == ("Psychologie", "Philosophie")
    assert metadata.genres == ("Lehrbuch",)
    assert len(metadata.identifiers) == 2
    assert [page.page_id for page in metadata.pages] == ["PHYS_0001", "PHYS_0002", "PHYS_0003", "PHYS_0004"]
    assert metadata.pages[0].features == ("fraktur", "single_column", "bitonal")
    assert metadata.pages[2].features == ("table",)
    assert len(extractor.extract_files(complete_mets, "resourceId", 3)) == 16


def test_repeated_extraction_is_idempotent(complete_mets) -> None:
    extractor = MetsExtractor()

    first = extractor.extract_metadata(complete_mets, "resourceId")
    second = extractor.extract_metadata(complete_mets, "resourceId")

    assert first == second
    assert extractor.extract_files(complete_mets, "resourceId", 1) == extractor.extract_files(
        complete_mets, "resourceId", 1
    )


def test_records_are_immutable(complete_mets) -> None:
    properties = MetsExtractor().extract_properties(complete_mets, "resourceId")

    with pytest.raises(dataclasses.FrozenInstanceError):
        properties.title = "changed"  # type: ignore[misc]


def test_resource_id_is_propagated_to_every_record(complete_mets) -> None:
    extractor = MetsExtractor()
    resource_id = "urn:ocrd:resource:42"

    records = [
        *extractor.extract_files(complete_mets, resource_id, 1),
        *extractor.extract_identifiers(complete_mets, resource_id),
        *extractor.extract_languages(complete_mets, resource_id),
        *extractor.extract_classifications(complete_mets, resource_id),
        *extractor.extract_genres(complete_mets, resource_id),
        *extractor.extract_ground_truth_features(complete_mets, resource_id),
    ]

    assert records
    assert {record.resource_id for record in records} == {resource_id}
    assert extractor.extract_properties(complete_mets, resource_id).resource_id == resource_id


def test_extractor_from_settings(build_mets, gt_dmd_sec) -> None:
    document = build_mets(
        dmd_secs=gt_dmd_sec("DMDGT_1", "sepia", "color"),
        file_sec=(
            "<mets:fileSec><mets:fileGrp USE='MAX'><mets:file ID='F1' MIMETYPE='application/alto+xml'>"
            "<mets:FLocat xlink:href='alto/1.xml'/></mets:file></mets:fileGrp></mets:fileSec>"
        ),
        struct_maps=(
            "<mets:structMap TYPE='PHYSICAL'><mets:div TYPE='physSequence'>"
            "<mets:div ID='PHYS_1' TYPE='page' ORDER='1' DMDID='DMDGT_1'><mets:fptr FILEID='F1'/></mets:div>"
            "</mets:div></mets:structMap>"
        ),
    )
    settings = ExtractionSettings(image_file_group="MAX", page_mimetype="application/alto+xml", strict_features=False)

    extractor = MetsExtractor.from_settings(settings)
    metadata = extractor.extract_metadata(document, "resourceId")

    assert metadata.no_of_pages == 1
    assert metadata.pages[0].features == (GroundTruthFeature.COLOR.value,)
    assert extractor.extract_page_urls(document) == ["alto/1.xml"]
    with pytest.raises(UnknownFeatureError):
        MetsExtractor().extract_metadata(document, "resourceId")


def test_lenient_mode_keeps_bibliographic_fields_despite_unknown_labels(build_mets, gt_dmd_sec) -> None:
    document = build_mets(
        mods="<mods:titleInfo><mods:title>Der Herold</mods:title></mods:titleInfo>",
        dmd_secs=gt_dmd_sec("DMDGT_1", "typewritten", "fraktur"),
        struct_maps=(
            "<mets:structMap TYPE='PHYSICAL'><mets:div TYPE='physSequence'>"
            "<mets:div ID='PHYS_1' TYPE='page' ORDER='1' DMDID='DMDGT_1'/>"
            "</mets:div></mets:structMap>"
        ),
    )

    metadata = MetsExtractor(strict_features=False).extract_metadata(document, "resourceId")

    assert metadata.title == "Der Herold"
    assert metadata.pages[0].features == ("fraktur",)
    with pytest.raises(UnknownFeatureError, match="typewritten"):
        MetsExtractor().extract_metadata(document, "resourceId")
