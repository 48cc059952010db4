"""UI components."""

from .alerts import ToastAlertSink
from .screens.board import BoardScreen
from .widgets.column import KanbanColumn
from .widgets.task_card import TaskCard

__all__ = [
    "BoardScreen",
    "KanbanColumn",
    "TaskCard",
    "ToastAlertSink",
]
