"""Command line interface: translate format patterns given as arguments or on stdin."""

import argparse
import logging
import sys
from collections.abc import Sequence

from ._sanitise import render_tokens
from .dictionary import list_dictionaries
from .errors import DateTokError
from .factory import convert_batch, get_tokenizer
from .predicate import list_predicates

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datetok",
        description="Translate date/time format patterns into Go reference-time layouts.",
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        help="Patterns to translate (default: read one pattern per line from stdin).",
    )
    parser.add_argument(
        "-d",
        "--dictionary",
        choices=list_dictionaries(),
        default=None,
        help="Token dictionary to translate with (default: standard).",
    )
    parser.add_argument(
        "-p",
        "--predicate",
        choices=[p for p in list_predicates() if p != "custom"],
        default=None,
        help="Adjacency predicate used to split tokens (default: default).",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the tokens of each pattern instead of translating it.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    patterns: list[str] = args.patterns or [
        line.rstrip("\r\n") for line in sys.stdin if line.strip()
    ]
    log.debug(f"processing {len(patterns)} patterns")

    try:
        if args.tokens:
            for pattern in patterns:
                tokens = get_tokenizer(pattern, args.predicate).read_all()
                print(render_tokens(tokens))
        else:
            for out in convert_batch(patterns, args.dictionary, args.predicate):
                print(out)
    except DateTokError as e:
        print(f"datetok: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
