"""Protocols for storage backends."""

from typing import Protocol

from ..models import Task


class StoreProtocol(Protocol):
    """Interface for key-value stores.

    Values are whole serialized documents. A store never exposes a
    partially written value: ``get`` returns either the previous or the
    new value of a key.
    """

    def get(self, key: str) -> str | None:
        """Read the value for a key.

        Returns:
            The stored text, or None if the key is absent.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Replace the value for a key.

        Raises:
            OSError: If the backend cannot be written.
        """
        ...

    def delete(self, key: str) -> None:
        """Remove a key.

        Note:
            Does not raise an error if the key doesn't exist.
        """
        ...


class RepositoryProtocol(Protocol):
    """Interface for task collection persistence."""

    def load_all(self) -> list[Task]:
        """Load the whole task collection.

        Returns:
            Tasks in stored order, or an empty list if nothing usable is stored.
        """
        ...

    def save_all(self, tasks: list[Task]) -> None:
        """Replace the whole task collection.

        Args:
            tasks: The complete collection to persist.
        """
        ...
