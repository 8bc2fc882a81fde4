"""Abstract base class for recurring event transformers."""

from abc import ABC, abstractmethod
from typing import Any

from interpreter.models import RecurringEvent


class BaseTransformer(ABC):
    """Abstract base class defining the interface for event transformers.

    Extend this class to emit recurring events in other calendar formats
    (e.g., Google Calendar API payloads, JSON, etc.).
    """

    @abstractmethod
    def transform(self, events: list[RecurringEvent]) -> Any:
        """Transform recurring events into the target format.

        Args:
            events: Recurring events produced by the interpreter.

        Returns:
            Transformed data in the target format.
        """
        pass

    @abstractmethod
    def save(self, output_path: str) -> None:
        """Save the transformed data to a file.

        Args:
            output_path: Path to the output file.
        """
        pass
