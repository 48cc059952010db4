"""Repository for the dashboard notes pad."""

from __future__ import annotations

import logging
from datetime import datetime

import frontmatter
import yaml

from ..utils import from_iso, now_utc
from .protocol import StoreProtocol

logger = logging.getLogger(__name__)


class NotesRepository:
    """
    Free-text notes stored as a markdown document with YAML front matter.

    The front matter records when the notes were last saved.
    """

    DEFAULT_KEY = "notes"

    def __init__(self, store: StoreProtocol, key: str = DEFAULT_KEY) -> None:
        self.store = store
        self.key = key

    def _read(self) -> str | None:
        try:
            return self.store.get(self.key)
        except UnicodeDecodeError as e:
            logger.warning("Ignoring undecodable notes '%s': %s", self.key, e)
            return None

    def load(self) -> str:
        """Load the notes text, or an empty string if none are stored."""
        payload = self._read()
        if payload is None:
            return ""
        try:
            post = frontmatter.loads(payload)
        except yaml.YAMLError as e:
            logger.warning("Notes front matter unreadable, using raw text: %s", e)
            return payload
        return post.content

    def last_saved(self) -> datetime | None:
        """Timestamp of the last save, if recorded."""
        payload = self._read()
        if payload is None:
            return None
        try:
            value = frontmatter.loads(payload).metadata.get("updated")
        except yaml.YAMLError:
            return None
        if value is None:
            return None
        return from_iso(str(value))

    def save(self, text: str) -> None:
        """Replace the stored notes."""
        post = frontmatter.Post(text)
        post.metadata = {"updated": now_utc().isoformat()}
        self.store.set(self.key, frontmatter.dumps(post, sort_keys=False))
        logger.debug("Saved notes (%d chars)", len(text))
