"""Service layer for business logic."""

from .board_service import BoardService
from .categorizer import categorize, derive_column
from .config_service import ConfigService
from .filter_service import FilterService, StatusFilter
from .notification_service import AlertSink, DeadlineNotifier, NotificationService

__all__ = [
    "AlertSink",
    "BoardService",
    "ConfigService",
    "DeadlineNotifier",
    "FilterService",
    "NotificationService",
    "StatusFilter",
    "categorize",
    "derive_column",
]
