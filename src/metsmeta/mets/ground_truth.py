"""Ground-truth page features and page-description URLs."""

from __future__ import annotations

import logging

from lxml import etree

from metsmeta.mets.fields import DEFAULT_FIELD_MAP, FieldKey, FieldMap
from metsmeta.mets.models import UNKNOWN, GroundTruthFeature, PageMetadata, UnknownFeatureError
from metsmeta.mets.query import QueryContext, QueryExecutor

logger = logging.getLogger(__name__)


def parse_order(raw: str) -> int | None:
    """Convert an ORDER attribute to an int; absent or non-numeric gives None."""

    text = raw.strip()
    if not text.isdecimal():
        return None
    return int(text)


def _attribute_or_unknown(executor: QueryExecutor, node: etree._Element, name: str) -> str:
    value = executor.attribute(node, name)
    return UNKNOWN if value is None else value


def extract_ground_truth_features(
    document: QueryContext,
    resource_id: str,
    *,
    field_map: FieldMap = DEFAULT_FIELD_MAP,
    executor: QueryExecutor | None = None,
    strict_features: bool = True,
) -> list[PageMetadata]:
    """Return one record per (page, feature) pair of the physical structure map.

    Only the first physical ``mets:structMap`` is considered. ORDER, ID and
    DMDID default to ``"unknown"`` independently of each other. An
    unrecognized feature label raises :class:`UnknownFeatureError` unless
    ``strict_features`` is false, in which case it is logged and skipped.
    """

    executor = executor or QueryExecutor()
    namespaces = field_map.namespaces()

    struct_maps = executor.nodes(document, field_map.resolve(FieldKey.PHYSICAL_MAP), namespaces)
    if not struct_maps:
        return []

    records: list[PageMetadata] = []
    page_nodes = executor.nodes(struct_maps[0], field_map.resolve(FieldKey.PAGE_NODES), namespaces)
    for page_node in page_nodes:
        order = _attribute_or_unknown(executor, page_node, "ORDER")
        page_id = _attribute_or_unknown(executor, page_node, "ID")
        dmd_id = _attribute_or_unknown(executor, page_node, "DMDID")

        labels = executor.values(document, field_map.resolve(FieldKey.GT_FEATURES), namespaces, dmd_id=dmd_id)
        for label in labels:
            try:
                feature = GroundTruthFeature.from_label(label)
            except UnknownFeatureError:
                if strict_features:
                    raise
                logger.warning("Skipping unknown ground truth feature %r on page %s", label, page_id)
                continue
            records.append(
                PageMetadata(
                    resource_id=resource_id,
                    order=parse_order(order),
                    page_id=page_id,
                    feature=feature,
                )
            )

    logger.debug("Extracted %d ground truth feature(s) from %d page(s)", len(records), len(page_nodes))
    return records


def extract_page_urls(
    document: QueryContext,
    *,
    field_map: FieldMap = DEFAULT_FIELD_MAP,
    executor: QueryExecutor | None = None,
) -> list[str]:
    """Locations of all referenced page-description files, as found."""

    executor = executor or QueryExecutor()
    return executor.values(document, field_map.resolve(FieldKey.PAGE_URLS), field_map.namespaces())
