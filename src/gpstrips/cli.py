import argparse
import sys
from typing import List, Optional

from gpstrips.config import TripConfig, DEFAULT_GAP_SECONDS, DEFAULT_JUMP_KM, DEFAULT_INPUT, DEFAULT_REJECTS
from gpstrips.core.stream import MissingColumnsError
from gpstrips.export.geojson import dump_feature_collection
from gpstrips.pipeline import run

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpstrips",
        description="Split raw GPS fixes into trips and write them to stdout as GeoJSON.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help="CSV file with lat/lon/timestamp columns (default: %(default)s)."
    )
    parser.add_argument(
        "--rejects",
        default=DEFAULT_REJECTS,
        help="Where rejected rows are logged (default: %(default)s)."
    )
    parser.add_argument(
        "--gap-seconds",
        type=int,
        default=DEFAULT_GAP_SECONDS,
        help="Split when consecutive fixes are more than this many seconds apart."
    )
    parser.add_argument(
        "--jump-km",
        type=float,
        default=DEFAULT_JUMP_KM,
        help="Split when consecutive fixes are more than this many km apart."
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print the run summary to stderr."
    )
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = TripConfig(gap_seconds=args.gap_seconds, jump_km=args.jump_km)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        collection, summary = run(args.input, args.rejects, config)
    except (FileNotFoundError, MissingColumnsError) as e:
        print(e, file=sys.stderr)
        return 1

    dump_feature_collection(collection, sys.stdout)
    if not args.quiet:
        print(summary, file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())
