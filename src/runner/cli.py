"""
CLI — sl2-word-trace

Образ слова свободной группы F(a, b) под представлением в SL(2, C)
с произвольной двоичной точностью.

Примеры:
    sl2-word-trace -p 100 -z 1 2 --word aBabb
    sl2-word-trace -p 100 -z 1 2 -r 3 2
    sl2-word-trace -p 256 --random-z --random-word 40 --seed 7 --eigen
    sl2-word-trace -p 100 -z 1 2 --word ab --json

Seed, разыгранный из энтропии ОС, печатается в stderr (для воспроизведения
запуска через --seed).

Коды выхода:
    0 — успех
    1 — ошибка вычисления (DegenerateMatrix)
    2 — ошибка аргументов / конфигурации
"""

import argparse
import json
import logging
import sys
from typing import Final, Sequence

from pydantic import ValidationError

from src.core.errors import DegenerateMatrix
from src.representation.generators import DEFAULT_REPRESENTATION, REPRESENTATIONS
from src.runner.config import ComplexInput, RunConfig
from src.runner.report import build_report, render_text
from src.runner.runner import run

logger = logging.getLogger(__name__)

EXIT_OK: Final[int] = 0
EXIT_COMPUTATION_ERROR: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """
    Настройка логирования (stderr, stdout остаётся под результат).

    Args:
        level: Уровень логирования (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sl2-word-trace",
        description="Evaluate a free group word on {a, b, A, B} as a 2x2 complex matrix "
        "at arbitrary binary precision and report the matrix and its trace.",
    )
    parser.add_argument(
        "-p", "--precision", type=int, required=True,
        help="Number of bits of precision for floating point arithmetic",
    )

    z_group = parser.add_mutually_exclusive_group(required=True)
    z_group.add_argument(
        "-z", nargs=2, metavar=("X", "Y"),
        help="z parameter, x + i y (decimal strings, parsed at full precision)",
    )
    z_group.add_argument(
        "--random-z", action="store_true",
        help="Use a random value for z (real and imaginary parts uniform in [0, 1))",
    )

    word_group = parser.add_mutually_exclusive_group(required=True)
    word_group.add_argument(
        "--word",
        help="The word to evaluate, a string over {a, b, A, B}",
    )
    word_group.add_argument(
        "-r", nargs=2, type=int, metavar=("P", "Q"),
        help="Obtain the word by locating the rational p/q in the Stern-Brocot tree",
    )
    word_group.add_argument(
        "--random-word", type=int, metavar="N",
        help="Use a uniform random (unreduced) word of the given length",
    )

    parser.add_argument(
        "--representation", default=DEFAULT_REPRESENTATION, choices=sorted(REPRESENTATIONS),
        help=f"Representation family (default: {DEFAULT_REPRESENTATION})",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for --random-z / --random-word (default: drawn from OS entropy and logged)",
    )
    parser.add_argument(
        "--eigen", action="store_true",
        help="Also report the dominant eigenvalue and eigenvector",
    )
    parser.add_argument(
        "--json", dest="output_json", action="store_true",
        help="Print a JSON report instead of text",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def build_config(args: argparse.Namespace) -> RunConfig:
    """
    RunConfig из разобранных аргументов.

    Raises:
        pydantic.ValidationError: при нарушении инвариантов конфигурации
    """
    return RunConfig(
        precision=args.precision,
        z=ComplexInput(re=args.z[0], im=args.z[1]) if args.z is not None else None,
        random_z=args.random_z,
        word=args.word,
        fraction={"p": args.r[0], "q": args.r[1]} if args.r is not None else None,
        random_word_length=args.random_word,
        representation=args.representation,
        seed=args.seed,
        eigen=args.eigen,
        output_json=args.output_json,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Точка входа CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = build_config(args)
    except ValidationError as e:
        print(f"error: invalid arguments:\n{e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        result = run(config)
    except DegenerateMatrix as e:
        logger.error("Computation failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_COMPUTATION_ERROR

    if result.seed is not None and config.seed is None:
        print(f"random seed: {result.seed}", file=sys.stderr)

    if config.output_json:
        print(json.dumps(build_report(result), indent=2))
    else:
        print(render_text(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
