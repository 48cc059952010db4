"""Main kanban board screen."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import Column, Task
from ..widgets.column import KanbanColumn
from ..widgets.summary_bar import SummaryBar


def _column_widget_id(column: Column) -> str:
    return f"column-{column.value.replace('_', '-')}"


class BoardScreen(Screen):
    """Kanban board with navigation, filter status and the analytics bar."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_task = 0
        # Pending focus state for deferred focus after refresh
        self._pending_focus_id: int | str | None = None

    @property
    def visible_columns(self) -> list[Column]:
        """Columns shown under the active filter, in display order."""
        status_filter = self.app.status_filter  # pyrefly: ignore[missing-attribute]
        if status_filter.column is not None:
            return [status_filter.column]
        return list(Column)

    @property
    def column_count(self) -> int:
        return len(self.visible_columns)

    def compose(self) -> ComposeResult:
        yield Header()

        with Container(id="board-container"), Horizontal(id="columns"):
            for column in Column:
                yield KanbanColumn(column, id=_column_widget_id(column))

        yield Static("", id="filter-status", classes="filter-status-bar")
        yield SummaryBar("", id="summary-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Show tasks when the screen mounts."""
        self.load_tasks()
        self.call_after_refresh(self._update_focus)

    def load_tasks(self) -> None:
        """Populate columns from the app's board under the active filter."""
        board = self.app.board  # pyrefly: ignore[missing-attribute]
        status_filter = self.app.status_filter  # pyrefly: ignore[missing-attribute]
        visible = self.app.filter_service.apply(  # pyrefly: ignore[missing-attribute]
            board, status_filter
        )

        for column in Column:
            widget = self._query_column(column)
            if widget is None:
                continue
            widget.display = column in visible.columns
            widget.set_tasks(visible.get_column(column))

        self.query_one("#summary-bar", SummaryBar).show(board.summary())
        self._update_filter_status()

    def refresh_board(self, focus_task_id: int | str | None = None) -> None:
        """
        Redraw the board from the app's current state.

        Args:
            focus_task_id: If provided, focus this task after refresh.
                           If None, keeps the current position.
        """
        self.load_tasks()
        self._pending_focus_id = focus_task_id
        # Double-defer so the columns have rebuilt their cards first
        self.call_after_refresh(lambda: self.call_after_refresh(self._apply_pending_focus))

    def _find_task_position(self, task_id: int | str) -> tuple[int, int] | None:
        """Find a task's (column_index, task_index) among visible columns."""
        for col_idx in range(self.column_count):
            column = self._get_column(col_idx)
            if column is None:
                continue
            for task_idx, task in enumerate(column.tasks):
                if task.id == task_id:
                    return (col_idx, task_idx)
        return None

    def _apply_pending_focus(self) -> None:
        if self._pending_focus_id is not None:
            position = self._find_task_position(self._pending_focus_id)
            self._pending_focus_id = None
            if position:
                self._current_column, self._current_task = position
                self._update_focus()
                return

        self._clamp_position()
        self._update_focus()

    def _clamp_position(self) -> None:
        """Keep the cursor inside the visible columns and tasks."""
        self._current_column = max(0, min(self._current_column, self.column_count - 1))
        column = self._get_column(self._current_column)
        if column and column.task_count > 0:
            self._current_task = max(0, min(self._current_task, column.task_count - 1))
        else:
            self._current_task = 0

    def navigate_column(self, delta: int) -> None:
        """Navigate between columns."""
        new_column = max(0, min(self._current_column + delta, self.column_count - 1))
        if new_column != self._current_column:
            self._current_column = new_column
            self._clamp_position()
            self._update_focus()

    def navigate_task(self, delta: int) -> None:
        """Navigate between tasks in current column."""
        column = self._get_column(self._current_column)
        if column is None or column.task_count == 0:
            return

        new_task = max(0, min(self._current_task + delta, column.task_count - 1))
        if new_task != self._current_task:
            self._current_task = new_task
            self._update_focus()

    def _query_column(self, column: Column) -> KanbanColumn | None:
        try:
            return self.query_one(f"#{_column_widget_id(column)}", KanbanColumn)
        except NoMatches:
            return None

    def _get_column(self, index: int) -> KanbanColumn | None:
        """Get visible column widget by index."""
        columns = self.visible_columns
        if index < 0 or index >= len(columns):
            return None
        return self._query_column(columns[index])

    def _update_focus(self) -> None:
        column = self._get_column(self._current_column)
        if column:
            column.focus_task(self._current_task)

    def get_current_task(self) -> Task | None:
        """Get the currently focused task."""
        column = self._get_column(self._current_column)
        if column:
            return column.get_task(self._current_task)
        return None

    def _update_filter_status(self) -> None:
        status_filter = self.app.status_filter  # pyrefly: ignore[missing-attribute]
        try:
            status = self.query_one("#filter-status", Static)
        except NoMatches:
            return
        if status_filter.is_active:
            status.update(
                f"[dim]Showing:[/] {status_filter.column.display_title} "
                "[dim](press again or 0 to show all)[/]"
            )
            status.display = True
        else:
            status.update("")
            status.display = False
