"""Application settings."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    project_root: Path = Field(
        default=Path(),
        description="Path to project root containing taskpulse.yml",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    user: str | None = Field(
        default_factory=lambda: os.environ.get("USER") or None,
        description="Signed-in user; the dashboard needs one",
    )

    role: str = Field(
        default="user",
        description="Role of the signed-in user",
    )

    required_role: str | None = Field(
        default=None,
        description="Role the dashboard requires; any signed-in user if unset",
    )

    model_config = {
        "env_prefix": "TASKPULSE_",
    }
