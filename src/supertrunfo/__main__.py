"""CLI entrypoint: python -m supertrunfo [--breakdown] [--log-level LEVEL]."""

import logging
import sys

from supertrunfo.config import DEFAULT_CONFIG
from supertrunfo.console.reader import InputReader
from supertrunfo.errors import InputExhaustedError
from supertrunfo.game import play


def main(argv: list[str] | None = None) -> int:
    import argparse
    p = argparse.ArgumentParser(description="Super Trunfo: compare two city cards")
    p.add_argument("--breakdown", action="store_true",
                   help="also print every attribute's values, scores and winner")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="log level (logs go to stderr)")
    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s %(message)s")

    reader = InputReader(sys.stdin, sys.stdout, DEFAULT_CONFIG)
    try:
        play(reader, DEFAULT_CONFIG, breakdown=args.breakdown)
    except InputExhaustedError as e:
        print(f"\nInput ended early: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
