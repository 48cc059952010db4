"""Task card widget."""

from __future__ import annotations

from datetime import date

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task
from ...utils import next_day

PROGRESS_WIDTH = 10


class TaskCard(Widget, can_focus=True):
    """A task card displayed in a column."""

    def __init__(
        self,
        task_data: Task,
        today: date | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        self._today = today

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this card."""
        return self._task_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(escape(self._truncate(self._task_data.title, 40)), classes="task-title")

        with Horizontal(classes="task-meta"):
            yield Static(self._format_progress(), classes="task-progress")
            deadline_text = self._format_deadline()
            if deadline_text:
                yield Static(deadline_text, classes="task-deadline")

        preview = self._get_description_preview()
        if preview:
            yield Static(escape(preview), classes="task-preview")

    def _format_progress(self) -> str:
        """Progress as a small bar plus percentage."""
        filled = round(PROGRESS_WIDTH * self._task_data.progress / 100)
        bar = "█" * filled + "░" * (PROGRESS_WIDTH - filled)
        return f"[cyan]{bar}[/] {self._task_data.progress_label}"

    def _format_deadline(self) -> str:
        """Deadline, highlighted when due today or tomorrow. Empty if none."""
        deadline = self._task_data.deadline
        if deadline is None:
            return ""
        if self._today is not None:
            if deadline == self._today:
                return "[bold red]due today[/]"
            if deadline == next_day(self._today):
                return "[yellow]due tomorrow[/]"
            if deadline < self._today:
                return f"[red]overdue {deadline.isoformat()}[/]"
        return f"[dim]due {deadline.isoformat()}[/]"

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"

    def _get_description_preview(self) -> str:
        """First non-empty line of the description."""
        for line in self._task_data.description.split("\n"):
            line = line.strip()
            if line:
                return self._truncate(line, 50)
        return ""
