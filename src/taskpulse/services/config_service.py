"""Configuration service for loading taskpulse.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models.taskpulse_config import BoardConfig, NotificationConfig, TaskpulseConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching application configuration."""

    CONFIG_FILE = "taskpulse.yml"

    def __init__(self, project_root: Path) -> None:
        """Initialize the config service.

        Args:
            project_root: Path to the directory holding taskpulse.yml
        """
        self.project_root = project_root
        self._config: TaskpulseConfig | None = None
        self._config_error: str | None = None

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    @property
    def data_root(self) -> Path:
        """Absolute data directory (project_root + config.data_root)."""
        return self.project_root / self.get_config().data_root

    def get_config(self) -> TaskpulseConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_board_config(self) -> BoardConfig:
        """Convenience method to get board configuration."""
        return self.get_config().board

    def get_notification_config(self) -> NotificationConfig:
        """Convenience method to get notification configuration."""
        return self.get_config().notifications

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _inside_project(self, data_root: str) -> bool:
        """Check data_root (symlinks followed) stays under project_root."""
        root = self.project_root.resolve()
        try:
            (root / data_root).resolve().relative_to(root)
        except ValueError:
            return False
        return True

    def _load_config(self) -> TaskpulseConfig:
        """Load configuration from file or return default."""
        config_path = self.project_root / self.CONFIG_FILE
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return TaskpulseConfig.default()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)

            if data is None:
                self._config_error = f"{self.CONFIG_FILE} is empty"
                logger.warning(self._config_error)
                return TaskpulseConfig.default()

            if not isinstance(data, dict):
                self._config_error = f"{self.CONFIG_FILE} must contain a mapping"
                logger.warning(self._config_error)
                return TaskpulseConfig.default()

            config = TaskpulseConfig(**data)
            if not self._inside_project(config.data_root):
                self._config_error = (
                    f"data_root '{config.data_root}' resolves outside {self.project_root}"
                )
                logger.warning(self._config_error)
                return TaskpulseConfig.default()

            logger.info("Loaded %s", self.CONFIG_FILE)
            return config

        except yaml.YAMLError as e:
            self._config_error = f"Invalid YAML in {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return TaskpulseConfig.default()

        except ValidationError as e:
            self._config_error = f"Invalid {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return TaskpulseConfig.default()

        except OSError as e:
            self._config_error = f"Error reading {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return TaskpulseConfig.default()
