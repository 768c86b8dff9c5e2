"""Runtime configuration for METS metadata extraction."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping


DEFAULT_IMAGE_FILE_GROUP = "OCR-D-IMG"
DEFAULT_PAGE_MIMETYPE = "application/vnd.prima.page+xml"
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(*, name: str, raw_value: str) -> bool:
    value = raw_value.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of: {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}")


def _parse_query_literal(*, name: str, raw_value: str) -> str:
    # Embedded into XPath string literals by the field map.
    if not raw_value:
        raise ValueError(f"{name} cannot be empty")
    if "'" in raw_value or '"' in raw_value:
        raise ValueError(f"{name} cannot contain quote characters")
    return raw_value


@dataclass(frozen=True, slots=True)
class ExtractionSettings:
    """Validated settings used to build the field map and run extraction."""

    image_file_group: str = DEFAULT_IMAGE_FILE_GROUP
    page_mimetype: str = DEFAULT_PAGE_MIMETYPE
    strict_features: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExtractionSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        image_file_group = _parse_query_literal(
            name="METSMETA_IMAGE_FILE_GROUP",
            raw_value=source.get("METSMETA_IMAGE_FILE_GROUP", DEFAULT_IMAGE_FILE_GROUP).strip(),
        )
        page_mimetype = _parse_query_literal(
            name="METSMETA_PAGE_MIMETYPE",
            raw_value=source.get("METSMETA_PAGE_MIMETYPE", DEFAULT_PAGE_MIMETYPE).strip(),
        )
        strict_features = _parse_bool(
            name="METSMETA_STRICT_FEATURES",
            raw_value=source.get("METSMETA_STRICT_FEATURES", "true").strip(),
        )

        log_level = source.get("METSMETA_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if not log_level:
            raise ValueError("METSMETA_LOG_LEVEL cannot be empty")
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"METSMETA_LOG_LEVEL is not a valid logging level: {log_level}")

        return cls(
            image_file_group=image_file_group,
            page_mimetype=page_mimetype,
            strict_features=strict_features,
            log_level=log_level,
        )
