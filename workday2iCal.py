#!/usr/bin/env python3
"""Workday schedule to iCalendar converter.

Reads the "View My Courses" sheet of a Workday export, interprets each
row's meeting patterns and generates an iCalendar (.ics) file with one
recurring event per weekday and meeting block.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from interpreter import RecurrenceExpander, ScheduleInterpreter
from reader import SheetNotFoundError, WorkdayReader
from transformer import ICalTransformer

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of converting one export file."""

    success: bool
    ics_content: Optional[bytes] = None
    events_created: int = 0
    rows_processed: int = 0
    error: Optional[str] = None


def process_workday_file(
    path: Union[str, Path],
    timezone: str = RecurrenceExpander.DEFAULT_TIMEZONE,
    default_location: str = RecurrenceExpander.DEFAULT_LOCATION,
    sheet_name: str = WorkdayReader.SHEET_NAME,
    calendar_name: str = ICalTransformer.DEFAULT_CALENDAR_NAME,
    max_workers: int = 1,
    output_path: Optional[str] = None
) -> ConversionResult:
    """Convert a Workday export into iCalendar data.

    Args:
        path: Path to the .xlsx export.
        timezone: Zone identifier for all event times.
        default_location: Location for meetings without a room.
        sheet_name: Worksheet holding the course list.
        calendar_name: Display name of the generated calendar.
        max_workers: Worker threads used to interpret rows.
        output_path: If given, the calendar is also saved to this .ics file.

    Returns:
        ConversionResult; failures are reported in its error field.
    """
    try:
        reader = WorkdayReader(sheet_name=sheet_name)
        rows = reader.load(path)

        expander = RecurrenceExpander(timezone=timezone, default_location=default_location)
        interpreter = ScheduleInterpreter(expander=expander)
        events = interpreter.interpret_rows(rows, max_workers=max_workers)

        transformer = ICalTransformer(
            calendar_name=calendar_name,
            timezone_name=expander.timezone.key
        )
        transformer.transform(events)
        if output_path is not None:
            transformer.save(output_path)

        return ConversionResult(
            success=True,
            ics_content=transformer.to_ical(),
            events_created=len(events),
            rows_processed=reader.rows_processed
        )
    except SheetNotFoundError as e:
        return ConversionResult(success=False, error=str(e))
    except Exception as e:
        logger.exception("Error processing file %s", path)
        return ConversionResult(success=False, error=f"Error processing file: {e}")


def main() -> None:
    """Main entry point for the converter."""
    parser = argparse.ArgumentParser(
        description="Convert a Workday course export to iCalendar format.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 workday2iCal.py "View_My_Courses.xlsx"
  python3 workday2iCal.py export.xlsx --timezone America/Toronto --output my_schedule.ics
        """
    )

    parser.add_argument(
        "input",
        help="Path to the Workday .xlsx export"
    )

    parser.add_argument(
        "-o", "--output",
        default="schedule.ics",
        help="Output file path (default: schedule.ics)"
    )

    parser.add_argument(
        "--timezone",
        default=RecurrenceExpander.DEFAULT_TIMEZONE,
        help=f"Timezone of the class times (default: {RecurrenceExpander.DEFAULT_TIMEZONE})"
    )

    parser.add_argument(
        "--location",
        default=RecurrenceExpander.DEFAULT_LOCATION,
        help="Location used when a meeting has no room "
             f"(default: {RecurrenceExpander.DEFAULT_LOCATION})"
    )

    parser.add_argument(
        "--sheet",
        default=WorkdayReader.SHEET_NAME,
        help=f"Worksheet name (default: {WorkdayReader.SHEET_NAME})"
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker threads used to interpret rows (default: 1)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log skipped meeting blocks and occurrences"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    # Ensure output file has .ics extension
    output_path = args.output
    if not output_path.lower().endswith(".ics"):
        output_path = f"{output_path}.ics"

    if args.workers < 1:
        print("Error: --workers must be at least 1.", file=sys.stderr)
        sys.exit(1)

    if not Path(args.input).is_file():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    print(f"Reading schedule from: {args.input}")

    try:
        result = process_workday_file(
            args.input,
            timezone=args.timezone,
            default_location=args.location,
            sheet_name=args.sheet,
            max_workers=args.workers,
            output_path=output_path
        )
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)

    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        sys.exit(1)

    print(f"Processed {result.rows_processed} course rows.")
    print(f"Created {result.events_created} recurring events.")

    if not result.events_created:
        print("Warning: No events found. The output file will be empty.")

    print(f"Schedule saved to: {output_path}")


if __name__ == "__main__":
    main()
