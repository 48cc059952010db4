"""Data models."""

from .board import Board, BoardSummary
from .enums import FILTER_ALL, Column, Severity
from .notification import Notification
from .session import Session
from .task import Task
from .taskpulse_config import (
    BoardConfig,
    NotificationConfig,
    ProgressThresholds,
    StorageConfig,
    TaskpulseConfig,
)

__all__ = [
    "FILTER_ALL",
    "Board",
    "BoardConfig",
    "BoardSummary",
    "Column",
    "Notification",
    "NotificationConfig",
    "ProgressThresholds",
    "Session",
    "Severity",
    "StorageConfig",
    "Task",
    "TaskpulseConfig",
]
