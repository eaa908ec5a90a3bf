"""Host Stats - Command line interface"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .analyzer import AuthLogAnalyzer, RegexLineMatcher
from .collectors import fetch_external_ip
from .config import load_config
from .exceptions import HostStatsError
from .logging import get_logger, set_global_log_level
from .mail import MailSettings, send_report
from .output import print_report
from .patterns import DEFAULT_PATTERN, FAILURE_PATTERNS, VERSION
from .render import render_html
from .report import ReportAssembler

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hoststats",
        description="Host Stats - Mail a host health report",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("-c", "--config", type=Path, help="Configuration file (YAML)")
    parser.add_argument("--auth-log", help="Auth log to scan for failed logins")
    parser.add_argument("-p", "--pattern", choices=sorted(FAILURE_PATTERNS),
                        default=DEFAULT_PATTERN, help="Failed login pattern")
    parser.add_argument("-o", "--output", type=Path, help="Also write the HTML report to this file")
    parser.add_argument("-j", "--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--print", dest="print_report", action="store_true",
                        help="Print the report to the terminal")
    parser.add_argument("--no-mail", action="store_true", help="Do not send the report by mail")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--version", action="version", version=f"hoststats v{VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()

    if args.verbose:
        set_global_log_level(logging.DEBUG)
    elif args.quiet:
        set_global_log_level(logging.WARNING)

    try:
        settings = load_config(args.config)

        analyzer = AuthLogAnalyzer(
            matcher=RegexLineMatcher.named(args.pattern),
            console=None if args.json else console,
        )
        assembler = ReportAssembler(
            auth_log=args.auth_log or settings['auth_log'],
            analyzer=analyzer,
            external_ip=lambda: fetch_external_ip(settings['ip_lookup_url']),
        )
        snapshot = assembler.assemble()

        if args.json:
            print(json.dumps(snapshot.to_dict(), indent=2))
        elif args.print_report:
            print_report(snapshot, console)

        html = render_html(snapshot)
        if args.output:
            args.output.write_text(html, encoding='utf-8')
            logger.info("Report saved to: %s", args.output)

        if not args.no_mail:
            send_report(MailSettings.from_config(settings), html)

    except HostStatsError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
