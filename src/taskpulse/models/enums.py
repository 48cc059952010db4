"""Enums for board columns and alert severity."""

from __future__ import annotations

from enum import Enum

FILTER_ALL = "all"


class Column(str, Enum):
    """The fixed set of board columns, in display order."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def display_title(self) -> str:
        """Display title for the column."""
        return _COLUMN_TITLES[self]

    @classmethod
    def parse(cls, value: object) -> Column | None:
        """
        Resolve a column from its value or display title.

        Returns None for anything that is not a column.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        for column in cls:
            if value == column.value or value == column.display_title:
                return column
        return None


_COLUMN_TITLES: dict[Column, str] = {
    Column.TODO: "To Do",
    Column.IN_PROGRESS: "In Progress",
    Column.COMPLETED: "Completed",
}


class Severity(str, Enum):
    """Deadline alert classes."""

    DUE_TODAY = "due_today"
    DUE_TOMORROW = "due_tomorrow"

    @property
    def toast_level(self) -> str:
        """Toast severity used by the UI."""
        if self is Severity.DUE_TODAY:
            return "error"
        return "warning"
