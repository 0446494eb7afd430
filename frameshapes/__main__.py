import argparse
import logging
import math
import re
import sys
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple

from frameshapes import (
    ReportConfig,
    Scene,
    default_scene,
    dump_scene,
    format_scene,
    get_report_config,
    load_scene,
    scale_about_point,
    set_report_config,
)

logger = logging.getLogger(__name__)

PROMPT = "Enter x, y and k: "

_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class BadInput(ValueError):
    pass


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _iter_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _split_numbers(token: str) -> Iterator[str]:
    # A token such as "2abc" yields "2" before the trailing garbage is reported.
    while token:
        match = _NUMBER_PREFIX.match(token)
        if match is None:
            raise BadInput(f"not a number: {token!r}")
        yield match.group()
        token = token[match.end():]


def read_requests(tokens: Iterable[str]) -> Iterator[Tuple[float, float, float]]:
    """Group numeric tokens into ``(x, y, k)`` triples.

    A token that starts with a number contributes that number before any
    trailing characters are rejected. Raises :class:`BadInput` on text that is
    not a finite number or when the input ends in the middle of a triple.
    """

    values: List[float] = []
    for token in tokens:
        for number in _split_numbers(token):
            value = float(number)
            if not math.isfinite(value):
                raise BadInput(f"not a finite number: {number!r}")
            values.append(value)
            if len(values) == 3:
                yield values[0], values[1], values[2]
                values = []
    if values:
        raise BadInput(f"incomplete request: expected 3 numbers, got {len(values)}")


def _show(scene: Scene) -> None:
    sys.stdout.write(format_scene(scene))
    sys.stdout.write("\n\n" + PROMPT)
    sys.stdout.flush()


def run_session(scene: Scene, stream: TextIO) -> int:
    """Print the scene and apply scale requests from ``stream`` until it ends.

    Returns the process exit status.
    """

    _show(scene)
    try:
        for x, y, k in read_requests(_iter_tokens(stream)):
            if k <= 0:
                logger.error("k cannot be less than or equal to zero")
                return 1
            logger.info("Scaling %d shape(s) by %g about (%g, %g)", len(scene), k, x, y)
            scale_about_point(scene, k, (x, y))
            sys.stdout.write("\n\n")
            _show(scene)
    except BadInput as exc:
        logger.error("bad input: %s", exc)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Report shape areas and frames, then scale the scene about points read from stdin",
    )
    parser.add_argument(
        "--scene",
        help="Path to a JSON scene document (default: built-in sample scene)",
    )
    parser.add_argument(
        "--save-scene",
        help="Write the final scene state as JSON to the given path",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=get_report_config().precision,
        help="Significant digits in the report (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        set_report_config(ReportConfig(precision=args.precision, indent=get_report_config().indent))
        scene = load_scene(args.scene) if args.scene else default_scene()
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    if len(scene) == 0:
        logger.error("Scene contains no shapes")
        raise SystemExit(1)

    status = run_session(scene, sys.stdin)

    if args.save_scene:
        dump_scene(scene, args.save_scene)

    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main(sys.argv[1:])
