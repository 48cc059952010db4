"""taskpulse TUI Application."""

from __future__ import annotations

import logging
from datetime import date

from textual.app import App
from textual.binding import Binding

from .config import Settings
from .models import Board, Session, Task
from .repositories import FileStore, NotesRepository, TaskRepository
from .services import (
    BoardService,
    ConfigService,
    FilterService,
    NotificationService,
    StatusFilter,
)
from .ui.alerts import ToastAlertSink
from .ui.screens.board import BoardScreen
from .ui.widgets import NotesModal
from .utils import today_in

logger = logging.getLogger(__name__)


class TaskpulseApp(App):
    """taskpulse - Terminal task dashboard."""

    TITLE = "taskpulse"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "refresh", "Reload", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Moving cards between columns
        Binding("H", "move_task_left", "Move ←", show=True),
        Binding("L", "move_task_right", "Move →", show=True),
        Binding("shift+left", "move_task_left", "Move ←", show=False),
        Binding("shift+right", "move_task_right", "Move →", show=False),
        # Status filter toggles
        Binding("1", "toggle_filter('todo')", "To Do", show=True),
        Binding("2", "toggle_filter('in_progress')", "In Progress", show=True),
        Binding("3", "toggle_filter('completed')", "Completed", show=True),
        Binding("0", "toggle_filter('all')", "All", show=False),
        # Notes pad
        Binding("N", "notes", "Notes", show=True),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.session = Session.from_settings(self.settings)
        self._init_services()
        self.loaded_tasks: list[Task] = []
        self.board = Board()
        self.status_filter = StatusFilter()

    def _init_services(self) -> None:
        """Initialize stores and services."""
        self.config_service = ConfigService(self.settings.project_root)
        config = self.config_service.get_config()

        self.store = FileStore(self.config_service.data_root)
        self.repository = TaskRepository(self.store, config.storage.tasks_key)
        self.notes_repository = NotesRepository(self.store, config.storage.notes_key)

        self.board_service = BoardService(self.repository, self.config_service)
        self.filter_service = FilterService()

        notifications = config.notifications
        self.notification_service = NotificationService(
            ToastAlertSink(self, timeout=notifications.toast_timeout),
            enabled=notifications.enabled,
            deduplicate=notifications.deduplicate,
        )

    @property
    def today(self) -> date:
        """Today in the configured timezone."""
        return today_in(self.config_service.get_notification_config().timezone)

    def on_mount(self) -> None:
        """Load the board, show it and raise deadline alerts."""
        if not self.session.authenticated:
            logger.warning("No signed-in user; refusing to open the dashboard")
            self.exit(return_code=1, message="Sign in first: set TASKPULSE_USER.")
            return

        required_role = self.settings.required_role
        if required_role and not self.session.has_role(required_role):
            logger.warning("User %s lacks role %s", self.session.user, required_role)
            self.exit(return_code=1, message=f"The dashboard requires the {required_role} role.")
            return

        self.sub_title = f"{self.session.user} ({self.session.role})"

        if self.config_service.has_config_error:
            self.notify(self.config_service.config_error or "", severity="warning", timeout=5)

        self.load_board()
        self.push_screen(BoardScreen())
        self.check_deadlines()

    def load_board(self) -> None:
        """Rebuild the board from storage."""
        self.loaded_tasks, self.board = self.board_service.load()

    def check_deadlines(self) -> None:
        """Alert on tasks due today or tomorrow (once per load)."""
        self.notification_service.notify(self.loaded_tasks, self.today)

    def action_refresh(self) -> None:
        """Reload tasks from storage, re-derive columns and re-check deadlines."""
        self.load_board()
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.refresh_board()
        self.check_deadlines()

    # Navigation actions
    def action_nav_left(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(1)

    def action_nav_up(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(1)

    # Task actions
    def action_move_task_left(self) -> None:
        """Move current task to the previous column."""
        self._move_current_task(-1)

    def action_move_task_right(self) -> None:
        """Move current task to the next column."""
        self._move_current_task(1)

    def _move_current_task(self, delta: int) -> None:
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        task = screen.get_current_task()
        if task is None:
            return

        try:
            if delta < 0:
                board = self.board_service.move_task_left(self.board, task.id)
            else:
                board = self.board_service.move_task_right(self.board, task.id)
        except OSError as e:
            logger.error("Saving tasks failed: %s", e)
            self.notify(f"Could not save tasks: {e}", severity="error", timeout=5)
            return

        if board is self.board:
            return

        self.board = board
        column = board.find_column(task.id)
        # A move can take the task out of the filtered view
        visible = self.filter_service.apply(board, self.status_filter)
        focus_id = task.id if column in visible.columns else None
        screen.refresh_board(focus_task_id=focus_id)
        if column is not None:
            self.notify(f"Moved to {column.display_title}", timeout=2)

    # Filter actions
    def action_toggle_filter(self, selection: str) -> None:
        """Toggle the status filter for one column ("all" clears it)."""
        self.status_filter = self.filter_service.toggle(self.status_filter, selection)
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.refresh_board()

    # Notes
    def action_notes(self) -> None:
        """Open the notes pad."""
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            NotesModal(self.notes_repository.load(), self.notes_repository.last_saved()),
            callback=self._handle_notes_result,
        )

    def _handle_notes_result(self, text: str | None) -> None:
        if text is None:
            return
        try:
            self.notes_repository.save(text)
        except OSError as e:
            logger.error("Saving notes failed: %s", e)
            self.notify(f"Could not save notes: {e}", severity="error", timeout=5)
            return
        self.notify("Notes saved", timeout=2)


def run(settings: Settings | None = None) -> int:
    """Run the taskpulse application."""
    app = TaskpulseApp(settings)
    app.run()
    return app.return_code or 0

