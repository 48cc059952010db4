"""Configuration models for taskpulse.yml."""

from pathlib import PurePath
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator


def _validate_key(value: str, name: str = "Key") -> str:
    """Validate a storage key is usable as a file stem."""
    if not value:
        raise ValueError(f"{name} cannot be empty")
    if not all(c.isalnum() or c in "_-" for c in value):
        raise ValueError(f"{name} must be alphanumeric with underscores or hyphens only")
    return value


class ProgressThresholds(BaseModel):
    """Upper bounds (inclusive) of the To Do and In Progress brackets."""

    todo_max: int = Field(default=40, ge=0, le=100)
    in_progress_max: int = Field(default=80, ge=0, le=100)

    @model_validator(mode="after")
    def validate_order(self) -> "ProgressThresholds":
        """Brackets must not overlap."""
        if self.todo_max >= self.in_progress_max:
            raise ValueError("todo_max must be lower than in_progress_max")
        return self


class BoardConfig(BaseModel):
    """Configuration for board categorization."""

    thresholds: ProgressThresholds = Field(default_factory=ProgressThresholds)


class StorageConfig(BaseModel):
    """Keys used in the task store."""

    tasks_key: str = "tasks"
    notes_key: str = "notes"

    @field_validator("tasks_key", "notes_key")
    @classmethod
    def validate_keys(cls, v: str) -> str:
        """Validate storage keys."""
        return _validate_key(v, "Storage key")

    @model_validator(mode="after")
    def validate_distinct(self) -> "StorageConfig":
        """Tasks and notes cannot share a key."""
        if self.tasks_key == self.notes_key:
            raise ValueError("tasks_key and notes_key must differ")
        return self


class NotificationConfig(BaseModel):
    """Deadline alert settings."""

    enabled: bool = True
    deduplicate: bool = Field(
        default=False,
        description="Suppress alerts already shown for the same task and rule",
    )
    timezone: str = Field(default="UTC", description="IANA zone used to decide 'today'")
    toast_timeout: float = Field(default=5, gt=0, description="Seconds a toast stays visible")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA zone."""
        if v == "UTC":
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as err:
            raise ValueError(f"Unknown timezone '{v}'") from err
        return v


class TaskpulseConfig(BaseModel):
    """Root configuration from taskpulse.yml."""

    version: int = 1
    data_root: str = Field(default=".taskpulse", description="Relative path to data directory")
    board: BoardConfig = Field(default_factory=BoardConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)

    @field_validator("data_root")
    @classmethod
    def validate_data_root(cls, v: str) -> str:
        """Validate data_root is a relative path."""
        path = PurePath(v)
        if path.is_absolute():
            raise ValueError("data_root must be a relative path")
        # Lexical check so the result does not depend on the working directory
        depth = 0
        for part in path.parts:
            depth += -1 if part == ".." else 1
            if depth < 0:
                raise ValueError("data_root must be within the project directory")
        return v

    @classmethod
    def default(cls) -> "TaskpulseConfig":
        """Return default configuration."""
        return cls()
