"""Progress categorization: which column a task belongs in."""

from ..models.enums import Column
from ..models.task import Task
from ..models.taskpulse_config import ProgressThresholds

DEFAULT_THRESHOLDS = ProgressThresholds()


def categorize(progress: int, thresholds: ProgressThresholds | None = None) -> Column:
    """
    Map a progress value to its column.

    Each bracket has an inclusive upper bound: with the default thresholds
    0-40 is To Do, 41-80 is In Progress and anything above is Completed.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    if progress <= thresholds.todo_max:
        return Column.TODO
    if progress <= thresholds.in_progress_max:
        return Column.IN_PROGRESS
    return Column.COMPLETED


def derive_column(task: Task, thresholds: ProgressThresholds | None = None) -> Column:
    """Column a task belongs in according to its progress."""
    return categorize(task.progress, thresholds)
