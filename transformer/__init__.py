"""Transformer module for converting recurring events to output formats."""

from .base import BaseTransformer
from .ical_transformer import ICAL_WEEKDAYS, ICalTransformer

__all__ = ["BaseTransformer", "ICAL_WEEKDAYS", "ICalTransformer"]
