"""Generate command for creating default config."""

import logging
from pathlib import Path

import yaml

from ..models.taskpulse_config import TaskpulseConfig
from .output import error, info, success

logger = logging.getLogger(__name__)

CONFIG_FILE = "taskpulse.yml"

# Header comments for generated file
CONFIG_HEADER = """\
# taskpulse Dashboard Configuration
#
# data_root: Relative path to the directory holding tasks.yaml and notes.yaml
#
# Progress thresholds (inclusive upper bounds):
#   - progress <= todo_max                      -> To Do
#   - todo_max < progress <= in_progress_max    -> In Progress
#   - progress > in_progress_max                -> Completed
#
# Notifications:
#   - enabled: show due-today / due-tomorrow alerts on startup
#   - deduplicate: do not repeat an alert for the same task within a session
#   - timezone: IANA zone used to decide which day is "today"
#   - toast_timeout: seconds each alert stays on screen

"""


def _is_valid_data_root(name: str, project_root: Path) -> bool:
    """Validate data root name."""
    path = Path(name)

    # Must be relative
    if path.is_absolute():
        return False

    # Must resolve to within project_root
    try:
        resolved = (project_root / path).resolve()
        resolved.relative_to(project_root.resolve())
    except ValueError:
        return False

    return True


def generate_config_yaml(data_root: str = ".taskpulse") -> str:
    """Generate YAML config from the default TaskpulseConfig model.

    Args:
        data_root: The data directory path to include in config
    """
    config_dict = TaskpulseConfig.default().model_dump()
    config_dict["data_root"] = data_root

    yaml_content = yaml.safe_dump(config_dict, default_flow_style=False, sort_keys=False)
    return CONFIG_HEADER + yaml_content


def run_generate(project_root: Path, data_root: str = ".taskpulse") -> int:
    """
    Generate default configuration.

    Args:
        project_root: Path to project root where taskpulse.yml will be created
        data_root: Data directory name used when writing a new config

    Returns:
        Exit code (0 = success, 1 = nothing to do or invalid input)
    """
    config_created = False
    dir_created = False

    config_path = project_root / CONFIG_FILE

    if config_path.exists():
        info(f"Config exists: {config_path}")
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        data_root = data.get("data_root", data_root)
    else:
        if not _is_valid_data_root(data_root, project_root):
            error(f"Invalid data directory: {data_root}")
            return 1

        project_root.mkdir(parents=True, exist_ok=True)
        config_path.write_text(generate_config_yaml(data_root))
        success(f"Generated config: {config_path}")
        logger.info("Generated %s", config_path)
        config_created = True

    data_dir = project_root / data_root
    if not data_dir.exists():
        data_dir.mkdir(parents=True)
        success(f"Created directory: {data_dir}/")
        dir_created = True
    else:
        info(f"Directory exists: {data_dir}/")

    if not config_created and not dir_created:
        print("Nothing to generate.")
        return 1

    return 0
