"""Command-line entry point for the R2 indicator.

Usage:
    r2-indicator <approximationFrontFile> <referenceFrontFile> <numberOfObjectives> [<weightVectorFile>]

Prints the R2 value of the approximation front, then the leave-one-out value
of a few illustrative points as ``index<TAB>value`` lines. An index past the
end of the front prints ``index<TAB>out-of-range`` instead. With two
objectives and no weight file the default 100 uniform weight vectors are
used; any other objective count needs a weight file.

Exit codes: 0 on success, 2 on usage errors, 1 on any other indicator error.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from r2_indicator.exceptions import ArgumentError, R2Error
from r2_indicator.fronts import read_front
from r2_indicator.indicator import R2
from r2_indicator.weights import DEFAULT_N_OBJ

logger = logging.getLogger(__name__)

DEFAULT_INDICES: tuple[int, ...] = (1, 15, 25, 75)
OUT_OF_RANGE = "out-of-range"

USAGE = "r2-indicator <approximationFrontFile> <referenceFrontFile> <numberOfObjectives> [<weightVectorFile>]"


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises ArgumentError instead of exiting."""

    def error(self, message: str) -> None:
        raise ArgumentError(message, suggestion=f"Usage: {USAGE}")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="r2-indicator",
        usage=USAGE,
        description="Compute the R2 indicator of an approximation front against a reference front.",
    )
    parser.add_argument("front", help="approximation front file (one point per line)")
    parser.add_argument("reference", help="reference front file used for normalization")
    parser.add_argument("n_obj", type=int, help="number of objectives")
    parser.add_argument("weights", nargs="?", default=None, help="weight vector file (required unless n_obj is 2)")
    parser.add_argument(
        "--indices",
        type=int,
        nargs="+",
        default=list(DEFAULT_INDICES),
        metavar="I",
        help="points whose leave-one-out value is printed (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse and validate command-line arguments.

    Raises:
        ArgumentError: If arguments are missing or inconsistent.
    """
    args = build_parser().parse_args(argv)
    if args.n_obj < 1:
        raise ArgumentError(f"numberOfObjectives must be positive, got {args.n_obj}")
    if args.weights is None and args.n_obj != DEFAULT_N_OBJ:
        raise ArgumentError(
            f"a weight vector file is required for {args.n_obj} objectives",
            suggestion=f"Usage: {USAGE}",
        )
    return args


def run(args: argparse.Namespace) -> None:
    """Compute and print the indicator values for parsed arguments."""
    if args.weights is None:
        indicator = R2()
    else:
        indicator = R2.from_file(args.weights, args.n_obj)

    approximation = read_front(args.front, n_obj=args.n_obj)
    reference = read_front(args.reference, n_obj=args.n_obj)
    logger.info("Scoring %d points against %d reference points", len(approximation), len(reference))

    print(indicator.value(approximation, reference))

    for index in args.indices:
        if not 0 <= index < len(approximation):
            logger.warning("Skipping index %d: front has %d points", index, len(approximation))
            print(f"{index}\t{OUT_OF_RANGE}")
            continue
        print(f"{index}\t{indicator.value_without(approximation, reference, index)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    try:
        args = parse_args(argv)
    except ArgumentError as e:
        logging.basicConfig(level=logging.ERROR, format="%(levelname)s - %(message)s")
        logger.error("%s", e)
        return 2

    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        run(args)
    except R2Error as e:
        logger.error("%s", e)
        return 1
    except ValueError as e:
        logger.error("Invalid input: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
