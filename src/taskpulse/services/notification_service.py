"""Deadline alerts: scanning tasks and dispatching notifications."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import Protocol

from ..models import Notification, Severity, Task
from ..utils import next_day

logger = logging.getLogger(__name__)


class AlertSink(Protocol):
    """Consumer of deadline alerts (toasts, sounds, console lines)."""

    def render(self, event: Notification) -> None:
        """Show one alert."""
        ...

    def play_cue(self) -> None:
        """Play the alert sound once."""
        ...


class DeadlineNotifier:
    """Finds tasks due today or tomorrow."""

    def scan(self, tasks: Iterable[Task], today: date) -> list[Notification]:
        """
        Scan tasks for close deadlines.

        Emits one due-today event per task whose deadline is ``today`` and
        one due-tomorrow event per task due the day after. Events keep the
        input order; other deadlines (and tasks without one) emit nothing.
        """
        tomorrow = next_day(today)
        events: list[Notification] = []

        for task in tasks:
            if task.deadline is None:
                continue
            if task.deadline == today:
                severity = Severity.DUE_TODAY
            elif task.deadline == tomorrow:
                severity = Severity.DUE_TOMORROW
            else:
                continue
            events.append(Notification(task_id=task.id, title=task.title, severity=severity))

        return events


class NotificationService:
    """
    Scans tasks and hands each alert to a sink.

    Every event is rendered and followed by one sound cue. Repeated scans
    alert again unless ``deduplicate`` is set, in which case an event seen
    before (same task, same rule) is dropped.
    """

    def __init__(
        self,
        sink: AlertSink,
        notifier: DeadlineNotifier | None = None,
        *,
        enabled: bool = True,
        deduplicate: bool = False,
    ) -> None:
        self.sink = sink
        self.notifier = notifier or DeadlineNotifier()
        self.enabled = enabled
        self.deduplicate = deduplicate
        self._seen: set[tuple[int | str, Severity]] = set()

    def notify(self, tasks: Iterable[Task], today: date) -> list[Notification]:
        """
        Scan and dispatch.

        Returns:
            The events that were dispatched.
        """
        if not self.enabled:
            return []

        events = self.notifier.scan(tasks, today)
        if self.deduplicate:
            events = [event for event in events if event.key not in self._seen]
            self._seen.update(event.key for event in events)

        for event in events:
            self.sink.render(event)
            self.sink.play_cue()

        if events:
            logger.info("Dispatched %d deadline alerts for %s", len(events), today.isoformat())
        return events
