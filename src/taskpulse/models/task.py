"""Task domain model."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """Represents a single unit of work on the board."""

    # Unknown fields written by other tools survive a load/save cycle
    model_config = ConfigDict(extra="allow")

    id: int | str
    title: str = Field(..., min_length=1)
    progress: int = Field(default=0, ge=0, le=100)
    deadline: date | None = None
    description: str = ""

    @property
    def progress_label(self) -> str:
        """Progress formatted for display."""
        return f"{self.progress}%"

    def to_record(self) -> dict:
        """Convert to a plain dict suitable for the task store."""
        return self.model_dump(mode="json")

    @classmethod
    def from_record(cls, record: dict) -> "Task":
        """Create Task from a stored record."""
        return cls.model_validate(record)
