"""
Command-line word tracker
=========================

Indexes the words of a text file into a persistent repository and prints
(or exports) a report of every word seen so far.

Usage:
    wordtracker input.txt -pf               # words and the files they occur in
    wordtracker input.txt -pl               # ... plus line numbers
    wordtracker input.txt -po               # ... plus occurrence counts
    wordtracker input.txt -po -f out.txt    # write the report to out.txt
    wordtracker input.txt --mode by-line --repository index.wtx
"""

import argparse
import sys
from typing import List, Optional

from ._common.config import ReportMode, TrackerConfig
from .api import track_words
from .logging import configure_logging, get_logger
from .storage.snapshot import SnapshotFormatError

logger = get_logger("cli")

NOT_EXPORTING = "Not exporting to file"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordtracker",
        description="Track where words occur across text files",
        allow_abbrev=False,
    )
    parser.add_argument("inputs", nargs="+", metavar="input",
                        help="Text file(s) to ingest")

    modes = parser.add_mutually_exclusive_group(required=True)
    for mode in ReportMode:
        modes.add_argument(mode.flag, dest="mode", action="store_const",
                           const=mode.value, help=f"Report {mode.value.replace('-', ' ')}")
    modes.add_argument("--mode", dest="mode", choices=[m.value for m in ReportMode],
                       help="Report mode by name")

    parser.add_argument("-f", "--output", dest="output", metavar="PATH",
                        help="Write the report to PATH instead of stdout "
                             "(accepts -fPATH as well)")
    parser.add_argument("--repository", metavar="PATH",
                        help="Repository snapshot file (default: $WORDTRACKER_REPOSITORY "
                             "or repository.wtx)")
    parser.add_argument("--encoding", help="Input/output text encoding")
    parser.add_argument("--no-save", action="store_true",
                        help="Report without loading or updating the repository")
    parser.add_argument("--log-level", metavar="LEVEL",
                        help="Logging level (default: $WORDTRACKER_LOG_LEVEL or WARNING)")
    return parser


def config_from_args(args: argparse.Namespace) -> TrackerConfig:
    config = TrackerConfig.from_env(
        repository_path=args.repository,
        encoding=args.encoding,
        report_mode=args.mode,
        output_path=args.output,
        log_level=args.log_level.upper() if args.log_level else None,
    )
    if args.no_save:
        config.persist = False
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(args)

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    configure_logging(config.log_level)

    try:
        report = track_words(args.inputs, config=config, header=True)
    except (OSError, SnapshotFormatError) as exc:
        logger.error("Word tracking failed: %s", exc)
        print(f"wordtracker: error: {exc}", file=sys.stderr)
        return 1

    if not config.output_path:
        print(report)
        print(NOT_EXPORTING)
    return 0


if __name__ == "__main__":
    sys.exit(main())
