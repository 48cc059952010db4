"""Board state models."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .enums import FILTER_ALL, Column
from .task import Task

if TYPE_CHECKING:
    from .taskpulse_config import ProgressThresholds


class BoardSummary(BaseModel):
    """Read-only task counts per column, used for the analytics bar."""

    model_config = ConfigDict(frozen=True)

    todo: int = 0
    in_progress: int = 0
    completed: int = 0

    @property
    def total(self) -> int:
        """Total number of tasks on the board."""
        return self.todo + self.in_progress + self.completed

    def count(self, column: Column) -> int:
        """Get the count for a single column."""
        return getattr(self, column.value)

    def as_dict(self) -> dict[str, int]:
        """Counts keyed by column display title, in column order."""
        return {column.display_title: self.count(column) for column in Column}


class Board(BaseModel):
    """
    Tasks grouped into ordered columns.

    Boards are treated as values: every operation that changes membership
    returns a new Board and leaves the original untouched. A filtered board
    only carries the selected column.
    """

    model_config = ConfigDict(frozen=True)

    columns: dict[Column, list[Task]] = Field(
        default_factory=lambda: {column: [] for column in Column}
    )

    @classmethod
    def from_tasks(
        cls, tasks: Iterable[Task], thresholds: ProgressThresholds | None = None
    ) -> Board:
        """
        Create Board from tasks, grouping by progress.

        Relative order within each column follows the input order.

        Args:
            tasks: Tasks to group
            thresholds: Optional ProgressThresholds; defaults to 40/80
        """
        # Import here to avoid circular import
        from ..services.categorizer import categorize

        columns: dict[Column, list[Task]] = {column: [] for column in Column}
        for task in tasks:
            columns[categorize(task.progress, thresholds)].append(task)
        return cls(columns=columns)

    def get_column(self, column: Column) -> list[Task]:
        """Get tasks for a specific column."""
        return self.columns.get(column, [])

    def visible_columns(self) -> list[tuple[Column, list[Task]]]:
        """Columns present on this board, in display order."""
        return [(column, self.columns[column]) for column in Column if column in self.columns]

    @property
    def is_filtered(self) -> bool:
        """True when some column is missing (a view, not the full collection)."""
        return any(column not in self.columns for column in Column)

    def as_flat(self) -> list[Task]:
        """All tasks, To Do first, then In Progress, then Completed."""
        flat: list[Task] = []
        for column in Column:
            flat.extend(self.get_column(column))
        return flat

    def find_column(self, task_id: int | str) -> Column | None:
        """Find which column currently holds a task."""
        for column, tasks in self.visible_columns():
            if any(task.id == task_id for task in tasks):
                return column
        return None

    def find_task(self, task_id: int | str) -> Task | None:
        """Find a task anywhere on the board."""
        for _column, tasks in self.visible_columns():
            for task in tasks:
                if task.id == task_id:
                    return task
        return None

    def summary(self) -> BoardSummary:
        """Count tasks per column."""
        return BoardSummary(
            todo=len(self.get_column(Column.TODO)),
            in_progress=len(self.get_column(Column.IN_PROGRESS)),
            completed=len(self.get_column(Column.COMPLETED)),
        )

    def filter_by_column(self, selection: Column | str | None) -> Board:
        """
        Restrict the board to one column.

        "all" (or None) returns this board unchanged. Unknown selections are
        treated as "all".
        """
        if selection is None or selection == FILTER_ALL:
            return self
        column = Column.parse(selection)
        if column is None:
            return self
        return Board(columns={column: list(self.get_column(column))})

    def override_column(self, task_id: int | str, column: Column) -> Board:
        """
        Place a task in a column explicitly.

        The task is removed from its current column and appended to the end
        of ``column``. Its progress is left as is, so the placement may
        disagree with a fresh categorization until the next reload.
        Returns this board unchanged if the task is not on it.
        """
        task = self.find_task(task_id)
        if task is None:
            return self

        columns = {
            key: [t for t in tasks if t.id != task_id] for key, tasks in self.columns.items()
        }
        columns.setdefault(column, []).append(task)
        return Board(columns=columns)
