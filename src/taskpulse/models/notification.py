"""Deadline notification model."""

from pydantic import BaseModel, ConfigDict

from .enums import Severity

_MESSAGES = {
    Severity.DUE_TODAY: 'Task Due Today: "{title}"',
    Severity.DUE_TOMORROW: 'Task Due Tomorrow: "{title}"',
}


class Notification(BaseModel):
    """A single deadline alert. Created and consumed within one scan."""

    model_config = ConfigDict(frozen=True)

    task_id: int | str
    title: str
    severity: Severity

    @property
    def message(self) -> str:
        """Human-readable alert text."""
        return _MESSAGES[self.severity].format(title=self.title)

    @property
    def key(self) -> tuple[int | str, Severity]:
        """Identity used when suppressing repeated alerts."""
        return (self.task_id, self.severity)
