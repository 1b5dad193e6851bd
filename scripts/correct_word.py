#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from semparser.common.config import Settings, settings
from semparser.corrections import CORRECTIONS, build_correction_from_settings
from semparser.dictionaries import load_word_list


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print ranked corrections for a word from plain word-list dictionaries."
    )
    parser.add_argument("word", help="Token to correct")
    parser.add_argument(
        "--dictionary",
        action="append",
        required=True,
        help="Word list bound as a permanent dictionary (repeatable)",
    )
    parser.add_argument(
        "--temporary",
        action="append",
        default=[],
        help="Word list searched before the permanent dictionaries (repeatable)",
    )
    parser.add_argument("--strategy", choices=sorted(CORRECTIONS), default=settings.correction_strategy)
    parser.add_argument("--max-distance", type=int, default=settings.max_distance)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = Settings(
        correction_strategy=args.strategy,
        max_distance=args.max_distance,
        lookup_if_known=settings.lookup_if_known,
        stemming_accuracy=settings.stemming_accuracy,
    )
    try:
        correction = build_correction_from_settings(config)
    except ValueError as exc:
        parser.error(str(exc))

    correction.init([load_word_list(path) for path in args.dictionary])
    temporary = [load_word_list(path) for path in args.temporary]

    for found in correction.correct_word(args.word, temporary):
        print(f"{found.value}\t{found.accuracy}\t{str(found.is_exact).lower()}")


if __name__ == "__main__":
    main()
