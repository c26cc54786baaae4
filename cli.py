from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import uvicorn

from textstats.analyze import analyze
from textstats.config import get_settings
from textstats.errors import TextStatsError
from textstats.export import dump_report, write_report
from textstats.loader import load_path
from textstats.log import setup_logging
from textstats.summarize import summarize_report


def cmd_analyze(args: argparse.Namespace) -> int:
	try:
		info, text = load_path(args.path)
	except TextStatsError as exc:
		print(exc.user_message(), file=sys.stderr)
		return 1

	report = analyze(text)
	if args.json:
		print(dump_report(report))
	else:
		print(summarize_report(report, info))

	if args.export:
		try:
			target = write_report(report, args.export)
		except OSError as exc:
			print(f"Cannot write report: {exc}", file=sys.stderr)
			return 1
		print(f"Report saved to {target}", file=sys.stderr)
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	target = "api:app" if args.api else "web.app:app"
	uvicorn.run(target, host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	settings = get_settings()
	parser = argparse.ArgumentParser(prog="textstats")
	parser.add_argument("--log-level", default=None, help="Override TEXTSTATS_LOG_LEVEL")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Analyze a .txt/.doc/.docx file and print statistics")
	pa.add_argument("path", help="Path to the document")
	pa.add_argument("--json", action="store_true", help="Print the report as JSON")
	pa.add_argument("--export", metavar="PATH", help="Also write the JSON report to PATH (file or directory)")
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run the web interface")
	ps.add_argument("--host", default=settings.host)
	ps.add_argument("--port", type=int, default=settings.port)
	ps.add_argument("--reload", action="store_true")
	ps.add_argument("--api", action="store_true", help="Serve the JSON API instead of the web page")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	setup_logging(args.log_level)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
