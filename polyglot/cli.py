"""Command-line entry point: translate a snippet to every target."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import translate_all, translate_traced
from .pipeline_types import TranslationConfig
from . import constants

logger = logging.getLogger(__name__)

DEMO_SOURCE = """\
def prepare_data(prices):
    # Normalise a price series
    scaler = MinMaxScaler(feature_range=(0, 1))
    scaled = scaler.fit_transform(np.array(prices).reshape(-1, 1))

    x, y = [], []
    LOOKBACK = 10

    for i in range(len(scaled) - LOOKBACK):
        x.append(scaled[i:i+LOOKBACK])
        y.append(scaled[i+LOOKBACK])

    return np.array(x), np.array(y)
"""


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate a Python-like snippet to Go, PHP, JavaScript and C#"
    )
    parser.add_argument("file", nargs="?", help="Source file to translate")
    parser.add_argument(
        "--target",
        "-t",
        action="append",
        choices=constants.SUPPORTED_TARGETS,
        help="Target to emit (repeatable; default: all)",
    )
    parser.add_argument(
        "--report", action="store_true", help="Print the analysis report"
    )
    parser.add_argument(
        "--trace", action="store_true", help="Print which rules rewrote the text"
    )
    parser.add_argument(
        "--json", action="store_true", help="Dump the full result as JSON"
    )
    parser.add_argument(
        "--grammar-check",
        action="store_true",
        help="Also parse each output with the target's tree-sitter grammar",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log pipeline progress"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if not args.file:
        source = DEMO_SOURCE
        if not args.json:
            print("No file provided. Using built-in demo:\n")
            print(source)
    else:
        try:
            with open(args.file, encoding="utf-8") as f:
                source = f.read()
        except OSError as exc:
            print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
            return 1
        logger.info("Read %d chars from %s", len(source), args.file)

    config = TranslationConfig(
        targets=tuple(args.target or constants.SUPPORTED_TARGETS),
        grammar_check=args.grammar_check,
    )
    result = translate_all(source, config)

    if args.json:
        payload = result.model_dump(mode="json")
        payload["confidence"] = result.confidences()
        print(json.dumps(payload, indent=2))
        return 0

    if args.report:
        print("═══ Analysis ═══")
        print(result.report)
        print()

    for target, text in result.translations.items():
        print(f"═══ {target.upper()} ({result.confidence(target)}% confidence) ═══")
        for warning in result.warnings[target]:
            print(f"  ! {warning}")
        print(text)
        if args.trace:
            trace = translate_traced(source, target)
            print(f"  rules: {', '.join(trace.changed_rules) or '-'}")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
