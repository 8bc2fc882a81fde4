"""Interpreter turning meeting-pattern text into recurring events."""

from .expander import RecurrenceExpander
from .models import CourseRow, MeetingBlock, RecurringEvent, WEEKDAY_NAMES, WEEKDAYS
from .schedule import ScheduleInterpreter
from .tokenizer import PatternTokenizer

__all__ = [
    "CourseRow",
    "MeetingBlock",
    "PatternTokenizer",
    "RecurrenceExpander",
    "RecurringEvent",
    "ScheduleInterpreter",
    "WEEKDAY_NAMES",
    "WEEKDAYS",
]
