import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tokenrank.core.report.sinks import open_sink
from tokenrank.messages.analysis_messages import (
    ANALYSIS_SUCCESS,
    INVALID_TOP,
    REPORT_WRITTEN,
)
from tokenrank.schemas.run_config import DEFAULT_PLOT_PATH, RunConfig
from tokenrank.services.analysis_service import build_service, read_text
from tokenrank.utils.exceptions import ArgumentError, TokenRankError
from tokenrank.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokenrank",
        description="Rank the tokens of a text file by frequency and plot them against Zipf's law.",
    )
    parser.add_argument("file", type=Path, help="Path to the input text file")
    parser.add_argument(
        "-p",
        "--punctuation",
        action="store_true",
        help="Retain punctuation (split it off as separate tokens)",
    )
    parser.add_argument(
        "-l", "--lower", action="store_true", help="Lowercase the input text (ASCII)"
    )
    parser.add_argument(
        "-s", "--stem", action="store_true", help="Stem tokens (Snowball, English)"
    )
    parser.add_argument(
        "-t", "--stop", action="store_true", help="Remove English stopwords"
    )
    parser.add_argument(
        "-n",
        "--proper-nouns",
        action="store_true",
        help="Keep only suspected proper nouns",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the report to FILE instead of stdout",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=DEFAULT_PLOT_PATH,
        help=f"Path of the HTML chart (default: {DEFAULT_PLOT_PATH})",
    )
    parser.add_argument(
        "--no-plot", action="store_true", help="Do not render the chart"
    )
    parser.add_argument(
        "--top", type=int, default=None, help="Report only the first N entries"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def parse_config(argv: Optional[List[str]] = None) -> RunConfig:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.top is not None and args.top < 0:
        parser.print_usage(sys.stderr)
        raise ArgumentError(code="INVALID_TOP", message=INVALID_TOP)

    return RunConfig(
        input_path=args.file,
        strip_punctuation=not args.punctuation,
        lowercase=args.lower,
        stem=args.stem,
        remove_stopwords=args.stop,
        proper_noun_filter=args.proper_nouns,
        output_path=args.output,
        plot_path=None if args.no_plot else args.plot,
        top=args.top,
        verbose=args.verbose,
    )


def run(config: RunConfig) -> int:
    service = build_service(config)

    text = read_text(config.input_path)
    logger.info(f"Loaded {config.input_path} ({len(text)} characters)")

    result = service.analyze(text)
    logger.info(
        f"{result.total_tokens} tokens, {len(result.entries)} distinct"
        f" (stopwords: {result.stopword_count})"
    )

    # sink is opened only once the analysis has succeeded
    written = service.write_report(result, open_sink(config.output_path))
    logger.debug(f"{REPORT_WRITTEN} ({written} lines)")

    if config.plot_path is not None:
        service.render_plot(result, config.plot_path)

    logger.info(ANALYSIS_SUCCESS)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = parse_config(argv)
    except ArgumentError as e:
        setup_logging()
        logger.error(f"❌ {e.code}: {e.message}")
        return e.exit_code

    setup_logging(config.verbose)
    try:
        return run(config)
    except TokenRankError as e:
        logger.error(f"❌ {e.code}: {e.message}")
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
