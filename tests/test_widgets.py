"""Tests for widgets and their formatting helpers."""

import asyncio
from datetime import date, datetime, timezone

from textual.app import App, ComposeResult

from taskpulse.models import BoardSummary, Column, Task
from taskpulse.ui.widgets.column import KanbanColumn, card_id
from taskpulse.ui.widgets.notes_modal import notes_title
from taskpulse.ui.widgets.summary_bar import format_summary
from taskpulse.ui.widgets.task_card import TaskCard

TODAY = date(2026, 10, 18)


class ColumnApp(App):
    """Bare app hosting a single To Do column."""

    def __init__(self, tasks: list[Task]) -> None:
        super().__init__()
        self.column_tasks = tasks

    def compose(self) -> ComposeResult:
        yield KanbanColumn(Column.TODO, id="column-todo")

    def on_mount(self) -> None:
        self.query_one(KanbanColumn).set_tasks(self.column_tasks)


def mounted_card_ids(tasks: list[Task]) -> list[int | str]:
    """Mount a column headlessly and return the task ids of its cards."""

    async def run() -> list[int | str]:
        app = ColumnApp(tasks)
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.pause()
            return [card.task.id for card in app.query(TaskCard)]

    return asyncio.run(run())


class TestCardId:
    """Tests for card_id."""

    def test_position_based(self):
        assert card_id(Column.TODO, 0) == "card-todo-0"
        assert card_id(Column.IN_PROGRESS, 3) == "card-in-progress-3"

    def test_distinct_per_column(self):
        assert card_id(Column.TODO, 0) != card_id(Column.COMPLETED, 0)


class TestKanbanColumn:
    """Tests for KanbanColumn card mounting."""

    def test_similar_task_ids_get_separate_cards(self):
        """Ids differing only by type, case or punctuation all mount."""
        tasks = [
            Task(id="A", title="Upper"),
            Task(id="a", title="Lower"),
            Task(id=1, title="Int"),
            Task(id="1", title="Str"),
            Task(id="a_b", title="Underscore"),
            Task(id="a-b", title="Hyphen"),
        ]

        assert mounted_card_ids(tasks) == ["A", "a", 1, "1", "a_b", "a-b"]


class TestFormatSummary:
    """Tests for format_summary."""

    def test_counts_and_total(self):
        text = format_summary(BoardSummary(todo=1, in_progress=2, completed=3))

        assert "To Do" in text
        assert "In Progress" in text
        assert "3 total" not in text
        assert "6 total" in text

    def test_empty_board(self):
        text = format_summary(BoardSummary(todo=0, in_progress=0, completed=0), width=4)
        assert "0 total" in text


class TestTaskCardDeadline:
    """Tests for the deadline label on cards."""

    def label(self, deadline: date | None, today: date | None = TODAY) -> str:
        task = Task(id=1, title="Report", deadline=deadline)
        return TaskCard(task, today=today)._format_deadline()

    def test_no_deadline(self):
        assert self.label(None) == ""

    def test_due_today(self):
        assert "due today" in self.label(TODAY)

    def test_due_tomorrow(self):
        assert "due tomorrow" in self.label(date(2026, 10, 19))

    def test_overdue(self):
        assert "overdue 2026-10-01" in self.label(date(2026, 10, 1))

    def test_later(self):
        assert "due 2026-12-24" in self.label(date(2026, 12, 24))

    def test_without_today(self):
        assert "due 2026-10-18" in self.label(TODAY, today=None)

    def test_progress_bar(self):
        card = TaskCard(Task(id=1, title="Half", progress=50))
        assert "█████░░░░░" in card._format_progress()
        assert "50%" in card._format_progress()


class TestNotesTitle:
    """Tests for the notes modal heading."""

    def test_never_saved(self):
        assert notes_title(None) == "Notes"

    def test_shows_save_time(self):
        saved = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)
        assert notes_title(saved) == "Notes (saved 2026-10-18 09:30 UTC)"
