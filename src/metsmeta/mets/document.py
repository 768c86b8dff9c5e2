"""Parse METS sources into lxml trees."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lxml import etree


@dataclass(slots=True)
class MetsDocumentError(Exception):
    """A METS source could not be read or parsed."""

    source: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (source={self.source})"


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False, huge_tree=False)


def load_mets(source: Path | str | bytes) -> etree._ElementTree:
    """Parse a METS file path or raw XML bytes without validating it."""

    if isinstance(source, bytes):
        label = "<bytes>"
        payload = source
    else:
        path = Path(source)
        label = str(path)
        try:
            payload = path.read_bytes()
        except OSError as exc:
            raise MetsDocumentError(label, f"Failed to read METS file: {exc}") from exc

    try:
        root = etree.fromstring(payload, parser=_parser())
    except etree.XMLSyntaxError as exc:
        raise MetsDocumentError(label, f"Malformed METS XML: {exc}") from exc
    return etree.ElementTree(root)
