"""Access Analytics - Command line interface"""

import argparse
import json
import logging
import re
import sys

from rich.console import Console
from rich.logging import RichHandler

from .analyzer import LogAnalyzer
from .config import LogAnalyzerConfig
from .errors import LogAnalyzerError
from .output import print_report
from .patterns import DEFAULT_LINE_PATTERN, VERSION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="access-analytics",
        description="Access Analytics - HTTP access log statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", help="Log file to analyze")
    parser.add_argument("-p", "--pattern", default=DEFAULT_LINE_PATTERN,
                        help="Line regex with named groups (default: combined log format)")
    parser.add_argument("--top-ips", type=int, default=4, help="Number of most active IPs to list")
    parser.add_argument("--top-urls", type=int, default=3, help="Number of most visited URLs to list")
    parser.add_argument("--clamp", action="store_true",
                        help="Truncate top lists instead of failing when fewer keys exist")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped lines")
    parser.add_argument("--version", action="version", version=f"AccessAnalytics v{VERSION}")
    return parser


def setup_logging(verbose: bool, console: Console):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)
    setup_logging(args.verbose, err_console)

    try:
        config = LogAnalyzerConfig.from_pattern(
            args.pattern,
            most_active_ips_count=args.top_ips,
            most_visited_urls_count=args.top_urls,
            clamp_rankings=args.clamp,
        )
    except re.error as e:
        err_console.print(f"[red]Error:[/] invalid pattern: {e}")
        return 2

    try:
        analyzer = LogAnalyzer(config, console=None if args.json else console)
        analytics = analyzer.analyze(args.logfile)
    except LogAnalyzerError as e:
        err_console.print(f"[red]Error:[/] {e}")
        return 1

    report = analytics.to_dict()
    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(analytics, console)

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(report, f, indent=2)
        if not args.json:
            console.print(f"\n[green]Report saved to:[/] {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
