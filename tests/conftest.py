from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from lxml import etree

from metsmeta.mets.document import load_mets

FIXTURES_DIR = Path(__file__).parent / "fixtures"

_METS_NAMESPACES = (
    'xmlns:mets="http://www.loc.gov/METS/" '
    'xmlns:mods="http://www.loc.gov/mods/v3" '
    'xmlns:xlink="http://www.w3.org/1999/xlink" '
    'xmlns:gt="http://www.ocr-d.de/GT/"'
)


def _build_mets(
    *,
    mods: str = "",
    dmd_secs: str = "",
    file_sec: str = "",
    struct_maps: str = "",
) -> etree._ElementTree:
    mods_section = ""
    if mods:
        mods_section = (
            '<mets:dmdSec ID="DMDLOG_0000"><mets:mdWrap MDTYPE="MODS"><mets:xmlData>'
            f"<mods:mods>{mods}</mods:mods>"
            "</mets:xmlData></mets:mdWrap></mets:dmdSec>"
        )
    xml = f"<mets:mets {_METS_NAMESPACES}>{mods_section}{dmd_secs}{file_sec}{struct_maps}</mets:mets>"
    return load_mets(xml.encode("utf-8"))


def _gt_dmd_sec(dmd_id: str, *props: str) -> str:
    states = "".join(f'<gt:state prop="{prop}"/>' for prop in props)
    return (
        f'<mets:dmdSec ID="{dmd_id}"><mets:mdWrap MDTYPE="OTHER" OTHERMDTYPE="GT"><mets:xmlData>'
        f"<gt:gt>{states}</gt:gt>"
        "</mets:xmlData></mets:mdWrap></mets:dmdSec>"
    )


@pytest.fixture
def build_mets() -> Callable[..., etree._ElementTree]:
    return _build_mets


@pytest.fixture
def gt_dmd_sec() -> Callable[..., str]:
    return _gt_dmd_sec


@pytest.fixture
def complete_mets_path() -> Path:
    return FIXTURES_DIR / "complete_mets.xml"


@pytest.fixture
def complete_mets(complete_mets_path: Path) -> etree._ElementTree:
    return load_mets(complete_mets_path)


@pytest.fixture
def legacy_mets() -> etree._ElementTree:
    return load_mets(FIXTURES_DIR / "legacy_mets.xml")
