"""Show the visits timetable for a prison on a given day, as JSON or a table.

Standalone CLI script. Fetches the session schedule from the visits
orchestration API and prints the timetable rows built from it.

Run with: python scripts/show_timetable.py --prison HEI
Date:     python scripts/show_timetable.py --prison HEI --date 2025-05-05
Table:    python scripts/show_timetable.py --prison HEI --table
JSON:     python scripts/show_timetable.py --prison HEI --json

Configuration comes from the environment or .env:
  ORCHESTRATION_API_URL, ORCHESTRATION_API_TOKEN, API_TIMEOUT_SECONDS,
  API_RETRY_ATTEMPTS, LOG_JSON, LOG_LEVEL

Exit codes:
  0 = success (JSON or table on stdout)
  1 = error (message on stderr)
"""

import argparse
import json
import os
import sys

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.timetable.client import OrchestrationApiClient  # noqa: E402
from src.timetable.config import get_config  # noqa: E402
from src.timetable.formatting import long_date  # noqa: E402
from src.timetable.logging import setup_logging  # noqa: E402
from src.timetable.service import (  # noqa: E402
    TimetableController,
    TimetablePage,
    VisitSessionsService,
)


def _log(msg: str) -> None:
    """Write diagnostic messages to stderr so stdout stays clean for JSON."""
    print(msg, file=sys.stderr)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show the visits timetable for a prison as JSON or table.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--prison",
        type=str,
        required=True,
        help="Prison code, e.g. HEI.",
    )
    parser.add_argument(
        "--date",
        type=str,
        default="",
        help="Day to show as YYYY-MM-DD (default: today; invalid dates fall back to today).",
    )
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--table",
        action="store_true",
        help="Output a human-readable table.",
    )
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Output the timetable page as JSON (default).",
    )
    return parser.parse_args(argv)


def _format_table(page: TimetablePage) -> str:
    """Format the timetable page as a human-readable table.

    Columns: Time | Type | Tables | Who can attend | Frequency | End date
    """
    title = f"Visits timetable - {page.prison_id} - {long_date(page.selected_date)}"
    if not page.rows:
        return f"{title}\n{page.empty_message}"

    headers = ["Time", "Type", "Tables", "Who can attend", "Frequency", "End date"]
    rows = [
        [r.time, r.type, r.capacity, r.attendees, r.frequency, r.end_date]
        for r in page.rows
    ]

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    separator = "-+-".join("-" * w for w in widths)
    row_lines = [
        " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)) for row in rows
    ]

    return "\n".join([title, header_line, separator, *row_lines])


def _format_json(page: TimetablePage) -> str:
    return json.dumps(page.model_dump(mode="json", by_alias=True), indent=2)


def main(args: argparse.Namespace) -> None:
    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    _log(f"show_timetable: starting (prison={args.prison}, date={args.date or 'today'})")

    client = OrchestrationApiClient.from_config(config)
    controller = TimetableController(VisitSessionsService(client))
    page = controller.view(args.prison, args.date)

    if args.table:
        print(_format_table(page))
    else:
        print(_format_json(page))

    _log(f"show_timetable: done ({len(page.rows)} rows)")


if __name__ == "__main__":
    args = _parse_args()
    try:
        main(args)
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
