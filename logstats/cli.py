"""Log Stats - Command line interface"""

import argparse
import json
import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import (
    VERSION, LogAnalyzer, UnmatchedLineSink, check_access, print_report,
    report_json, resolve_input_path,
)
from .patterns import DEFAULT_TOP, UNMATCHED_LOG_FILE

console = Console()
err_console = Console(stderr=True)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Log Stats - Unique and most frequent IPs and URLs of an access log",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", nargs="?", help="Log file to analyze (prompted for when omitted)")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-t", "--top", type=int, default=DEFAULT_TOP,
                        help=f"Number of top IPs and URLs to report (default: {DEFAULT_TOP})")
    parser.add_argument("-u", "--unmatched-file", default=UNMATCHED_LOG_FILE,
                        help=f"File receiving lines without an IP address (default: {UNMATCHED_LOG_FILE})")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug diagnostics")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Warnings and errors only")
    parser.add_argument("--version", action="version", version=f"LogStats v{VERSION}")

    return parser.parse_args(argv)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger("logstats")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(console=err_console, show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    log = setup_logging(level)

    filepath = resolve_input_path(args.logfile)
    if not check_access(filepath):
        return 1

    analyzer = LogAnalyzer(
        sink=UnmatchedLineSink(args.unmatched_file),
        top=args.top,
        console=None if args.json else err_console
    )
    summary = analyzer.analyze_file(filepath)
    if summary is None:
        return 1

    if args.json:
        print(report_json(summary))
    else:
        print_report(summary, console)

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                json.dump(summary.to_dict(), f, indent=2)
        except OSError as e:
            log.error("Error writing report: %s", e)
            return 1
        if args.json:
            log.info("Report saved to: %s", args.output)
        else:
            console.print(f"\n[green]Report saved to:[/] {escape(args.output)}")

    return 0
