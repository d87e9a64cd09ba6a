# File: videoconverter/main.py

import argparse
import logging
import sys
from typing import List, Optional

from videoconverter.core.config.settings import settings
from videoconverter.features.conversion.service.handler import VideoConversionHandler

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="videoconverter",
        description="Merge an uploaded video's chunks and package it as MPEG-DASH."
    )
    parser.add_argument(
        "payload",
        nargs="?",
        help='Task JSON, e.g. \'{"video_id": 1, "path": "/media/uploads/1"}\'. Read from stdin when omitted.'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if settings.PERSIST_ERRORS:
        from videoconverter.core.database.connection import init_db
        init_db()

    payload = args.payload if args.payload is not None else sys.stdin.read()
    result = VideoConversionHandler().handle(payload)
    return 0 if result.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
