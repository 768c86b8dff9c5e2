"""Scalar bibliographic properties read from the MODS section."""

from __future__ import annotations

import logging

from metsmeta.mets.fields import DEFAULT_FIELD_MAP, FieldKey, FieldMap
from metsmeta.mets.models import MetsProperties
from metsmeta.mets.query import QueryContext, QueryExecutor

logger = logging.getLogger(__name__)

_FIRST_MATCH_FIELDS: dict[str, FieldKey] = {
    "title": FieldKey.TITLE,
    "sub_title": FieldKey.SUB_TITLE,
    "year": FieldKey.YEAR,
    "author": FieldKey.AUTHOR,
    "publisher": FieldKey.PUBLISHER,
    "physical_description": FieldKey.PHYSICAL_DESCRIPTION,
    "ppn": FieldKey.PPN,
}


def join_license(values: list[str]) -> str:
    """Join all non-blank license statements, trimmed, with ``", "``."""

    return ", ".join(value.strip() for value in values if value.strip())


def extract_properties(
    document: QueryContext,
    resource_id: str,
    *,
    field_map: FieldMap = DEFAULT_FIELD_MAP,
    executor: QueryExecutor | None = None,
) -> MetsProperties:
    """Collect the document's scalar properties.

    Every scalar takes the first match of its query and stays unset without
    one. The license is the exception: all non-blank matches are kept. The
    page count is the number of matches of the image query.
    """

    executor = executor or QueryExecutor()
    namespaces = field_map.namespaces()

    scalars: dict[str, str | None] = {
        name: executor.first_value(document, field_map.resolve(key), namespaces)
        for name, key in _FIRST_MATCH_FIELDS.items()
    }

    license_values = executor.values(document, field_map.resolve(FieldKey.LICENSE), namespaces)
    license_text = join_license(license_values) if license_values else None

    no_of_pages = len(executor.values(document, field_map.resolve(FieldKey.NUMBER_OF_IMAGES), namespaces))

    logger.debug("Extracted properties for resource_id=%s: pages=%d", resource_id, no_of_pages)
    return MetsProperties(
        resource_id=resource_id,
        license=license_text,
        no_of_pages=no_of_pages,
        **scalars,
    )
