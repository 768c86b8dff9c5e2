"""CLI command printing the metadata extracted from one METS file as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from metsmeta.mets.config import ExtractionSettings
from metsmeta.mets.document import MetsDocumentError, load_mets
from metsmeta.mets.extractor import MetsExtractor
from metsmeta.mets.models import UnknownFeatureError
from metsmeta.mets.query import QueryError

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract bibliographic and page metadata from a METS file")
    parser.add_argument("--path", required=True, help="METS XML file")
    parser.add_argument("--resource-id", required=True, help="Resource id attached to every record")
    parser.add_argument("--version", type=int, default=1, help="Document version used for file records")
    parser.add_argument("--files", action="store_true", help="Include file records in the output")
    parser.add_argument("--page-urls", action="store_true", help="Include page-description URLs in the output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = ExtractionSettings.from_env()
    except ValueError as exc:
        logging.basicConfig(format=_LOG_FORMAT, level=logging.INFO, stream=sys.stderr)
        logger.error("Configuration error: %s", exc)
        print(json.dumps({"error": str(exc)}, ensure_ascii=False, indent=2))
        return 1

    logging.basicConfig(
        format=_LOG_FORMAT,
        level=settings.log_level,
        stream=sys.stderr,
    )

    extractor = MetsExtractor.from_settings(settings)
    try:
        document = load_mets(args.path)
        metadata = extractor.extract_metadata(document, args.resource_id)
        payload: dict[str, object] = {
            "path": args.path,
            "resourceId": args.resource_id,
            "metadata": metadata.to_dict(),
        }
        if args.files:
            files = extractor.extract_files(document, args.resource_id, args.version)
            payload["files"] = [item.to_dict() for item in files]
        if args.page_urls:
            payload["pageUrls"] = extractor.extract_page_urls(document)
    except (MetsDocumentError, QueryError, UnknownFeatureError) as exc:
        logger.error("Extraction failed for %s: %s", args.path, exc)
        print(json.dumps({"path": args.path, "error": str(exc)}, ensure_ascii=False, indent=2))
        return 1

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
