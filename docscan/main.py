"""
docscan — точка входа командной строки.

Использование:
    docscan deck.pptx
    docscan report.pdf --mime-type application/pdf --json-logs
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .contracts import RawDocument
from .dispatcher import extract
from .errors import ExtractionError
from .logging_config import get_logger, setup_logging
from .settings import settings

EXIT_OK = 0
EXIT_FILE_ERROR = 1
EXIT_EXTRACTION_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docscan",
        description="Extract plain text and metadata from a PDF or PPTX file.",
    )
    parser.add_argument("file", type=Path, help="Path to a .pdf or .pptx file")
    parser.add_argument(
        "--mime-type",
        default=None,
        help="Declared MIME type (guessed from the file extension if omitted)",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Главная функция CLI. Возвращает код выхода."""
    args = build_arg_parser().parse_args(argv)

    # stdout занят JSON результатом
    setup_logging(args.log_level, json_format=args.json_logs or None, stream=sys.stderr)
    logger = get_logger("docscan.main")

    try:
        document = RawDocument.from_path(args.file, mime_type=args.mime_type)
    except OSError as e:
        logger.error(f"Cannot read file | file={args.file} error={type(e).__name__}: {e}")
        return EXIT_FILE_ERROR

    try:
        content = extract(document)
    except ExtractionError as e:
        logger.error(f"Extraction failed | file={document.file_name} error={type(e).__name__}: {e}")
        return EXIT_EXTRACTION_ERROR

    print(json.dumps(content.to_dict(), ensure_ascii=False, indent=2))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
