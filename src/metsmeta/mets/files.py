"""File references of the METS file section."""

from __future__ import annotations

import logging

from lxml import etree

from metsmeta.mets.fields import DEFAULT_FIELD_MAP, FieldKey, FieldMap
from metsmeta.mets.models import MetsFile
from metsmeta.mets.query import QueryContext, QueryExecutor

logger = logging.getLogger(__name__)


def extract_mets_files(
    document: QueryContext,
    resource_id: str,
    version: int,
    *,
    field_map: FieldMap = DEFAULT_FIELD_MAP,
    executor: QueryExecutor | None = None,
) -> list[MetsFile]:
    """Return one record per ``mets:file`` in document order."""

    executor = executor or QueryExecutor()
    namespaces = field_map.namespaces()
    logger.info("Extract files from METS document. resource_id=%s version=%s", resource_id, version)

    files: list[MetsFile] = []
    groups = executor.nodes(document, field_map.resolve(FieldKey.FILE_GROUPS), namespaces)
    logger.debug("Found %d fileGrp(s)", len(groups))
    for group in groups:
        use = executor.attribute(group, "USE")
        file_nodes = executor.nodes(group, field_map.resolve(FieldKey.GROUP_FILES), namespaces)
        logger.debug("fileGrp USE=%s contains %d file(s)", use, len(file_nodes))
        for file_node in file_nodes:
            file_id = executor.attribute(file_node, "ID")
            page_id = resolve_page_id(document, file_node, file_id, field_map=field_map, executor=executor)
            mime_type = executor.attribute(file_node, "MIMETYPE")
            url = executor.first_value(file_node, field_map.resolve(FieldKey.FILE_LOCATION), namespaces)
            logger.debug("file id=%s page_id=%s mimetype=%s url=%s", file_id, page_id, mime_type, url)
            files.append(
                MetsFile(
                    resource_id=resource_id,
                    version=version,
                    file_id=file_id,
                    mime_type=mime_type,
                    page_id=page_id,
                    use_label=use,
                    url=url,
                )
            )
    return files


def resolve_page_id(
    document: QueryContext,
    file_node: etree._Element,
    file_id: str | None,
    *,
    field_map: FieldMap = DEFAULT_FIELD_MAP,
    executor: QueryExecutor | None = None,
) -> str | None:
    """Page id of a file: the pointing structural div first, legacy GROUPID second."""

    executor = executor or QueryExecutor()
    if file_id is not None:
        page_id = executor.first_value(
            document,
            field_map.resolve(FieldKey.PAGE_ID_OF_FILE),
            field_map.namespaces(),
            file_id=file_id,
        )
        if page_id is not None:
            return page_id
    return executor.attribute(file_node, "GROUPID")
