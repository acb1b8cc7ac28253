from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .chain_io import dump_change_set, load_chain
from .config import ParallelWayConfig
from .materialize import copy_chain
from .offset import DegenerateSegmentError, InvalidTopologyError, build_ordered_path, change_offset

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Make a parallel copy of connected ways.")
    parser.add_argument("input_json", type=Path, help="Chain JSON (vertices + polylines)")
    parser.add_argument("output_json", type=Path, help="Output change set JSON")
    parser.add_argument("--offset", type=float, required=True, help="Signed offset, positive = left")
    parser.add_argument(
        "--reference",
        type=int,
        default=None,
        help="Index of the way that fixes the direction (default: from input)",
    )
    parser.add_argument(
        "--copy-tags",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Copy tags to the new vertices and ways (default: from config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to parallelway.json config",
    )
    parser.add_argument("--wkt", action="store_true", help="Include the result as WKT")
    args = parser.parse_args(argv)

    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    config = ParallelWayConfig.from_json(args.config) if args.config else ParallelWayConfig.load_default()
    config.validate()
    copy_tags = config.copy_tags_default if args.copy_tags is None else args.copy_tags

    chain = load_chain(args.input_json)
    copied = copy_chain(chain, copy_tags)
    try:
        path = build_ordered_path(copied, args.reference)
    except (InvalidTopologyError, DegenerateSegmentError) as exc:
        logger.error("%s", exc)
        return 2

    copied.apply_positions(path, change_offset(path, args.offset))
    change_set = copied.change_set(path)
    extra = {"offset": args.offset}
    if args.wkt:
        extra["wkt"] = copied.to_geometry().wkt
    dump_change_set(change_set, args.output_json, **extra)
    logger.info("Wrote %s", args.output_json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
