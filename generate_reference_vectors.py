#!/usr/bin/env python3
"""
Reference Vector Generator - command line entry point

Writes the golden PRNG vectors as JSON (hex integers, %.20e doubles).

Examples:
  python3 generate_reference_vectors.py
  python3 generate_reference_vectors.py --algorithm xorshift32 --count 1000
  python3 generate_reference_vectors.py --config suite.json --output vectors.json
  python3 generate_reference_vectors.py --list

Exit codes:
  0  success
  1  config file not found
  2  invalid or unreadable configuration (unknown algorithm, bad seed/range,
     schema error, config path not readable)
  3  bounded sampler variants disagree
  4  cannot write output
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from prng_reference import SamplerMismatchError, generate_suite
from prng_reference.generators import get_generator_info, list_algorithms
from prng_reference.schemas import default_suite, load_suite_config
from prng_reference.serialization import dump_vectors

logger = logging.getLogger("generate_reference_vectors")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG = 2
EXIT_MISMATCH = 3
EXIT_IO = 4


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("Count must be a non-negative integer.")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate bit-exact PRNG reference vectors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1],
    )
    parser.add_argument("--algorithm", "-a", action="append", metavar="NAME",
                        help="Only emit vectors for this algorithm (repeatable)")
    parser.add_argument("--count", "-n", type=_non_negative_int,
                        help="Override the number of outputs per vector")
    parser.add_argument("--config", type=Path,
                        help="Suite config JSON (default: built-in suite)")
    parser.add_argument("--output", "-o", type=Path,
                        help="Write JSON here instead of stdout")
    parser.add_argument("--list", action="store_true",
                        help="List available algorithms and exit")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging to stderr")
    return parser


def print_algorithms() -> None:
    for name in list_algorithms():
        info = get_generator_info(name)
        cls = info['class']
        print(f"  {name:14} {cls.output_bits}-bit  {info['description']}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.list:
        print_algorithms()
        return EXIT_OK

    try:
        suite = load_suite_config(args.config) if args.config else default_suite()
        if args.algorithm:
            suite = suite.select(args.algorithm)
        if args.count is not None:
            suite = suite.with_count(args.count)

        vectors = generate_suite(suite.vectors)

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return EXIT_NOT_FOUND
    except SamplerMismatchError as e:
        logger.error(f"Cross-validation failed: {e}")
        return EXIT_MISMATCH
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG
    except OSError as e:
        logger.error(f"Cannot read config: {e}")
        return EXIT_CONFIG

    try:
        if args.output is None:
            dump_vectors(vectors, sys.stdout)
        else:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            with args.output.open("w", encoding="utf-8") as f:
                dump_vectors(vectors, f)
            logger.info(f"Wrote {len(vectors)} vector(s) to {args.output}")
    except OSError as e:
        logger.error(f"Cannot write output: {e}")
        return EXIT_IO

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
