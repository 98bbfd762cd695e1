"""
Command-line entry point for point geometry

Evaluates group operations on points given on the command line and prints
the contents of point archives.
"""

import argparse
import logging
import sys
from typing import List, Optional

from point_geometry.group import compose, between, inverse
from point_geometry.serialization import PointArchive, resolve_type, POINT_TYPES
from point_geometry.utils.config_manager import ConfigManager
from point_geometry.utils.vectors import format_fields


def _parse_points(type_tag: str, values: List[float], count: int) -> list:
    """Split a flat list of numbers into count points of the given type."""
    cls = resolve_type(type_tag)
    dimension = cls.Dim()
    if len(values) != count * dimension:
        raise ValueError(
            f"{type_tag} needs {count * dimension} numbers for {count} point(s), got {len(values)}"
        )
    return [cls.from_vector(values[i * dimension:(i + 1) * dimension]) for i in range(count)]


def _render(label: str, point, precision: int) -> str:
    return f"{label}{format_fields(point.vector(), precision)}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Group operations on 2D, 3D and stereo points"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text, count in (
        ("compose", "Compose two points (field-wise addition)", 2),
        ("between", "Relative point taking the first point to the second", 2),
        ("inverse", "Negate a point", 1),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("type", choices=sorted(POINT_TYPES), help="Point type")
        sub.add_argument(
            "values",
            type=float,
            nargs="+",
            help=f"Coordinates of {count} point(s), concatenated"
        )
        sub.set_defaults(count=count)

    show = subparsers.add_parser("show", help="Print every point in an archive")
    show.add_argument("archive", type=str, help="Path to a YAML point archive")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the point geometry command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = ConfigManager(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.get_log_level()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)
    precision = config.get_precision()

    try:
        if args.command == "show":
            points = PointArchive(config).load(args.archive)
            for name, point in points.items():
                print(_render(f"{name} [{type(point).__name__}]: ", point, precision))
            return 0

        operands = _parse_points(args.type, args.values, args.count)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "compose":
        result = compose(*operands)
    elif args.command == "between":
        result = between(*operands)
    else:
        result = inverse(operands[0])

    logger.debug(f"{args.command}{tuple(operands)} = {result}")
    print(_render("", result, precision))
    return 0


if __name__ == "__main__":
    sys.exit(main())
