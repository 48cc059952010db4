"""Service for board state management."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from ..models import Board, BoardSummary, Column, Task
from ..models.taskpulse_config import ProgressThresholds
from ..repositories import RepositoryProtocol

if TYPE_CHECKING:
    from .config_service import ConfigService

logger = logging.getLogger(__name__)

COLUMN_ORDER: list[Column] = list(Column)


class BoardService:
    """
    Builds boards from the repository and applies moves to them.

    Boards are values: ``move_task`` takes a board and returns the resulting
    board, writing the flattened result back through the repository.
    """

    def __init__(
        self,
        repository: RepositoryProtocol,
        config_service: ConfigService | None = None,
    ) -> None:
        self.repository = repository
        self._config_service = config_service
        self._write_lock = threading.Lock()

    def _get_thresholds(self) -> ProgressThresholds:
        """Get progress thresholds, using defaults if no config service."""
        if self._config_service:
            return self._config_service.get_board_config().thresholds
        return ProgressThresholds()

    def load(self) -> tuple[list[Task], Board]:
        """Load the task collection and the board built from it."""
        tasks = self.repository.load_all()
        board = Board.from_tasks(tasks, self._get_thresholds())
        logger.debug("Board loaded: %s", board.summary().as_dict())
        return tasks, board

    def load_board(self) -> Board:
        """Load the board with all tasks grouped by progress."""
        _tasks, board = self.load()
        return board

    def summary(self, board: Board | None = None) -> BoardSummary:
        """Task counts per column."""
        if board is None:
            board = self.load_board()
        return board.summary()

    def resolve_target(self, board: Board, over: int | str | Column) -> Column | None:
        """
        Resolve where a card was dropped.

        A task id means "the column holding that task"; anything else is
        read as a column id or title.
        """
        if not isinstance(over, Column):
            column = board.find_column(over)
            if column is not None:
                return column
        return Column.parse(over)

    def move_task(self, board: Board, task_id: int | str, over: int | str | Column) -> Board:
        """
        Move a task to the column referenced by ``over``.

        Unknown tasks, unknown targets and same-column drops return the
        board unchanged and persist nothing. A real move appends the task to
        the end of the target column and saves the flattened board. The
        task's progress is not changed.

        The flattened result replaces the whole stored collection, so a
        filtered board is refused (returned unchanged, nothing persisted).
        """
        if board.is_filtered:
            logger.warning("move_task: refusing to move %s on a filtered board", task_id)
            return board

        with self._write_lock:
            source = board.find_column(task_id)
            if source is None:
                logger.debug("move_task: task not found: %s", task_id)
                return board

            target = self.resolve_target(board, over)
            if target is None:
                logger.debug("move_task: unknown drop target: %s", over)
                return board

            if source == target:
                logger.debug("move_task: %s already in %s", task_id, source.value)
                return board

            moved = board.override_column(task_id, target)
            self.repository.save_all(moved.as_flat())

        logger.info("Task moved: %s (%s -> %s)", task_id, source.value, target.value)
        return moved

    def move_task_left(self, board: Board, task_id: int | str) -> Board:
        """Move task to the previous column (e.g., in_progress -> todo)."""
        column = board.find_column(task_id)
        if column is None:
            return board

        new_column = self._neighbour(column, -1)
        if new_column is None:
            return board  # Already at leftmost column

        return self.move_task(board, task_id, new_column)

    def move_task_right(self, board: Board, task_id: int | str) -> Board:
        """Move task to the next column (e.g., todo -> in_progress)."""
        column = board.find_column(task_id)
        if column is None:
            return board

        new_column = self._neighbour(column, 1)
        if new_column is None:
            return board  # Already at rightmost column

        return self.move_task(board, task_id, new_column)

    def _neighbour(self, column: Column, delta: int) -> Column | None:
        """Get the column ``delta`` steps away, if any."""
        idx = COLUMN_ORDER.index(column) + delta
        if 0 <= idx < len(COLUMN_ORDER):
            return COLUMN_ORDER[idx]
        return None
