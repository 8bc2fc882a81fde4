"""Reader module for extracting course rows from Workday exports."""

from .workday_reader import SheetNotFoundError, WorkdayReader

__all__ = ["SheetNotFoundError", "WorkdayReader"]
