"""Session model: the authentication fact handed to the dashboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from ..config import Settings


class Session(BaseModel):
    """Who is looking at the board. Credentials are checked elsewhere."""

    model_config = ConfigDict(frozen=True)

    authenticated: bool = False
    user: str | None = None
    role: str | None = None

    def has_role(self, role: str) -> bool:
        """Check the session carries a specific role."""
        return self.authenticated and self.role == role

    @classmethod
    def from_settings(cls, settings: Settings) -> Session:
        """Build a session from application settings."""
        if not settings.user:
            return cls()
        return cls(authenticated=True, user=settings.user, role=settings.role)
