"""Repository layer for data access."""

from .notes_repository import NotesRepository
from .protocol import RepositoryProtocol, StoreProtocol
from .store import FileStore, MemoryStore
from .task_repository import TaskRepository

__all__ = [
    "FileStore",
    "MemoryStore",
    "NotesRepository",
    "RepositoryProtocol",
    "StoreProtocol",
    "TaskRepository",
]
