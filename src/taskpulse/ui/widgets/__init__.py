"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .notes_modal import NotesModal
from .summary_bar import SummaryBar
from .task_card import TaskCard

__all__ = [
    "EmptyColumnMessage",
    "KanbanColumn",
    "NotesModal",
    "SummaryBar",
    "TaskCard",
]
