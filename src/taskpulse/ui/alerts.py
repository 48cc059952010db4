"""Alert sink that shows deadline alerts as Textual toasts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Notification

if TYPE_CHECKING:
    from textual.app import App


class ToastAlertSink:
    """Renders each alert as a toast and rings the terminal bell."""

    def __init__(self, app: App, timeout: float = 5) -> None:
        self.app = app
        self.timeout = timeout

    def render(self, event: Notification) -> None:
        self.app.notify(
            event.message,
            title="Deadline",
            severity=event.severity.toast_level,
            timeout=self.timeout,
        )

    def play_cue(self) -> None:
        self.app.bell()
