"""Repository for the flat task collection."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

import yaml
from pydantic import ValidationError

from ..models import Task
from .protocol import StoreProtocol

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    Loads and saves the whole task collection under a single store key.

    Only the flat list of task records is persisted. Column membership is
    never stored; boards are rebuilt from progress on every load.
    """

    DEFAULT_KEY = "tasks"

    def __init__(self, store: StoreProtocol, key: str = DEFAULT_KEY) -> None:
        """
        Initialize repository.

        Args:
            store: Key-value store holding the serialized collection
            key: Store key for the collection
        """
        self.store = store
        self.key = key
        self._lock = threading.Lock()

    def load_all(self) -> list[Task]:
        """
        Load all tasks.

        An absent or malformed payload yields an empty list; the problem is
        logged, never raised.
        """
        try:
            with self._lock:
                payload = self.store.get(self.key)
        except UnicodeDecodeError as e:
            logger.warning("Ignoring undecodable task payload '%s': %s", self.key, e)
            return []

        if payload is None:
            logger.debug("No stored tasks under '%s'", self.key)
            return []

        try:
            records = yaml.safe_load(payload)
        except yaml.YAMLError as e:
            logger.warning("Ignoring unreadable task payload '%s': %s", self.key, e)
            return []

        if records is None:
            return []
        if not isinstance(records, list):
            logger.warning(
                "Ignoring task payload '%s': expected a list, got %s",
                self.key,
                type(records).__name__,
            )
            return []

        try:
            tasks = [Task.from_record(record) for record in records]
        except (ValidationError, TypeError) as e:
            logger.warning("Ignoring invalid task payload '%s': %s", self.key, e)
            return []

        logger.debug("Loaded %d tasks from '%s'", len(tasks), self.key)
        return tasks

    def save_all(self, tasks: Iterable[Task]) -> None:
        """
        Replace the stored collection.

        Store failures propagate to the caller.
        """
        records = [task.to_record() for task in tasks]
        payload = yaml.safe_dump(records, default_flow_style=False, sort_keys=False)

        with self._lock:
            self.store.set(self.key, payload)

        logger.debug("Saved %d tasks to '%s'", len(records), self.key)
