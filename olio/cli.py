"""Command line renderer: reads a scene file and writes the rendered image."""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from olio.faults import install_segfault_handler
from olio.parser import ParseError, parse_file
from olio.raytracer import RayTracer

logger = logging.getLogger(__name__)


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(prog="rtbasic", description="options", add_help=False)
    parser.add_argument("-h", "--help", action="store_true", help="print usage")
    parser.add_argument("-s", "--input_scene", help="Input scene file")
    parser.add_argument("-o", "--output", help="Output name")
    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> Optional[argparse.Namespace]:
    """Parse the command line; returns None after printing usage."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as exc:
        print(parser.format_help())
        logger.error("%s", exc)
        return None
    if args.help:
        print(parser.format_help())
        return None
    for option in ("input_scene", "output"):
        if getattr(args, option) is None:
            print(parser.format_help())
            logger.error("the option '--%s' is required but missing", option)
            return None
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the scene named on the command line to the output image."""
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    install_segfault_handler()
    random.seed(123543)

    args = parse_arguments(argv)
    if args is None:
        return -1

    try:
        parsed = parse_file(args.input_scene)
    except ParseError as exc:
        logger.error("Parse error: %s", exc)
        return -1

    tracer = RayTracer(parsed.image_size[1])
    try:
        tracer.render(parsed.scene, parsed.camera)
    except ValueError as exc:
        logger.error("%s", exc)
        return 0
    tracer.write_image(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())