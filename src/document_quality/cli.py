#!/usr/bin/env python3
"""CLI tool for document quality validation.

Usage:
    document-quality scan.jpg
    document-quality page1.png claim.pdf --summary
    document-quality claim.pdf --max-pages 10 --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from document_quality.dispatcher import QualityDispatcher
from document_quality.page_aggregator import MultiPageAggregator
from document_quality.report import LegibilityReport

logger = logging.getLogger(__name__)

EXIT_ACCEPTABLE = 0
EXIT_REJECTED = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="document-quality",
        description="Check whether scanned documents are good enough for OCR / AI extraction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  document-quality scan.jpg
  document-quality page1.png claim.pdf --summary
  document-quality claim.pdf --max-pages 10
        """,
    )

    parser.add_argument(
        "files",
        nargs="+",
        type=str,
        help="Image (.jpg, .png, ...) or PDF files to validate",
    )

    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the legibility summary instead of the full verdict",
    )

    parser.add_argument(
        "--max-pages",
        type=int,
        default=None,
        help="Reject PDFs with more pages than this (default: no limit)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    paths = [Path(f) for f in args.files]
    missing = [p for p in paths if not p.is_file()]
    if missing:
        for path in missing:
            logger.error(f"File not found: {path}")
        return EXIT_USAGE_ERROR

    if args.max_pages is not None and args.max_pages < 1:
        logger.error(f"--max-pages must be at least 1, got {args.max_pages}")
        return EXIT_USAGE_ERROR

    dispatcher = QualityDispatcher(aggregator=MultiPageAggregator(max_pages=args.max_pages))
    results = dispatcher.batch_validate(paths)

    output = []
    for path, verdict in results:
        body = LegibilityReport.from_verdict(verdict).to_dict() if args.summary else verdict.to_dict()
        output.append({"file": str(path), **body})

    print(json.dumps(output, indent=2, ensure_ascii=False))

    if all(verdict.is_acceptable for _, verdict in results):
        return EXIT_ACCEPTABLE
    return EXIT_REJECTED


if __name__ == "__main__":
    sys.exit(main())
