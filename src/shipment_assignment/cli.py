from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .engine import assign
from .report import render_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shipment-assignment",
        description="Assign shipment destinations to drivers and report suitability scores.",
    )
    parser.add_argument(
        "--shipment-file",
        type=Path,
        required=True,
        help="File containing newline separated shipment addresses",
    )
    parser.add_argument(
        "--driver-file",
        type=Path,
        required=True,
        help="File containing newline separated driver names",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log skipped lines and matching details",
    )
    return parser


def read_lines(path: Path) -> List[str]:
    return path.read_text(encoding="utf-8-sig").split("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        shipments = read_lines(args.shipment_file)
        drivers = read_lines(args.driver_file)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read files %s, %s: %s", args.shipment_file, args.driver_file, exc)
        return 1

    result = assign(shipments, drivers)
    sys.stdout.write(render_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
