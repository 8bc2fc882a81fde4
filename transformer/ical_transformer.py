"""iCalendar transformer for recurring course events."""

import hashlib
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from icalendar import Calendar, Event, vRecur

from interpreter.models import RecurringEvent
from .base import BaseTransformer


# Indexed by date.weekday()
ICAL_WEEKDAYS = ("MO", "TU", "WE", "TH", "FR", "SA", "SU")


class ICalTransformer(BaseTransformer):
    """Transformer that converts recurring events to iCalendar format."""

    DEFAULT_CALENDAR_NAME = "UBC Schedule"
    DEFAULT_TIMEZONE = "America/Vancouver"
    UID_DOMAIN = "workday-2-cal"

    def __init__(
        self,
        calendar_name: str = DEFAULT_CALENDAR_NAME,
        timezone_name: str = DEFAULT_TIMEZONE
    ) -> None:
        """Initialize the iCalendar transformer.

        Args:
            calendar_name: Display name of the generated calendar.
            timezone_name: Zone advertised in X-WR-TIMEZONE.
        """
        self._calendar: Optional[Calendar] = None
        self._calendar_name = calendar_name
        self._timezone_name = timezone_name

    def _generate_uid(self, event: RecurringEvent) -> str:
        """Generate a stable identifier for an event.

        Args:
            event: The recurring event.

        Returns:
            Unique identifier string.
        """
        unique_string = (
            f"{event.title}-{event.weekday}-{event.first_occurrence_start.isoformat()}-"
            f"{event.first_occurrence_end.isoformat()}-{event.until_date}-{event.location}"
        )
        return hashlib.md5(unique_string.encode()).hexdigest() + f"@{self.UID_DOMAIN}"

    @staticmethod
    def _build_rrule(event: RecurringEvent) -> vRecur:
        """Build the weekly rule; UNTIL is expressed in UTC."""
        return vRecur({
            "freq": "WEEKLY",
            "interval": event.interval_weeks,
            "byday": [ICAL_WEEKDAYS[event.weekday]],
            "until": event.until.astimezone(timezone.utc)
        })

    def transform(self, events: list[RecurringEvent]) -> Calendar:
        """Transform recurring events into iCalendar format.

        Args:
            events: Recurring events to emit, one VEVENT each.

        Returns:
            iCalendar Calendar object.
        """
        self._calendar = Calendar()
        self._calendar.add("prodid", "-//Workday Schedule to iCal//workday-2-cal//EN")
        self._calendar.add("version", "2.0")
        self._calendar.add("calscale", "GREGORIAN")
        self._calendar.add("method", "PUBLISH")
        self._calendar.add("x-wr-calname", self._calendar_name)
        self._calendar.add("x-wr-timezone", self._timezone_name)

        stamp = datetime.now(ZoneInfo(self._timezone_name))

        for recurring_event in events:
            ical_event = Event()
            ical_event.add("uid", self._generate_uid(recurring_event))
            ical_event.add("dtstart", recurring_event.first_occurrence_start)
            ical_event.add("dtend", recurring_event.first_occurrence_end)
            ical_event.add("dtstamp", stamp)
            ical_event.add("summary", recurring_event.title)
            ical_event.add("description", recurring_event.description)
            ical_event.add("location", recurring_event.location)
            ical_event.add("rrule", self._build_rrule(recurring_event))

            self._calendar.add_component(ical_event)

        # VTIMEZONE for every TZID referenced by the events
        self._calendar.add_missing_timezones()

        return self._calendar

    def to_ical(self) -> bytes:
        """Serialize the calendar.

        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        if self._calendar is None:
            raise RuntimeError("No calendar data. Call transform() first.")

        return self._calendar.to_ical()

    def save(self, output_path: str) -> None:
        """Save the calendar to an .ics file.

        Args:
            output_path: Path to the output file.

        Raises:
            RuntimeError: If transform() hasn't been called yet.
        """
        data = self.to_ical()

        with open(output_path, "wb") as f:
            f.write(data)
