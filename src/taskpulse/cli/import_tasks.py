"""Import command: replace the local task collection with a remote one."""

import logging

from pydantic import ValidationError

from ..api import ApiClient, ApiError
from ..models import Task
from ..repositories import RepositoryProtocol
from .output import error, success

logger = logging.getLogger(__name__)


def parse_task_list(data: object) -> list[Task]:
    """
    Read tasks from a decoded JSON body.

    Accepts a bare list of task records or an object with a ``tasks`` list.

    Raises:
        ValueError: If the body holds no task list or a record is invalid.
    """
    if isinstance(data, dict):
        data = data.get("tasks")
    if not isinstance(data, list):
        raise ValueError("Response does not contain a task list")
    try:
        return [Task.from_record(record) for record in data]
    except (ValidationError, TypeError) as e:
        raise ValueError(f"Invalid task record: {e}") from e


def run_import(url: str, repository: RepositoryProtocol, client: ApiClient | None = None) -> int:
    """
    Fetch tasks from ``url`` and store them locally.

    Returns:
        Exit code (0 = imported, 1 = failed; local tasks untouched)
    """
    owns_client = client is None
    client = client or ApiClient()
    try:
        data = client.fetch_json(url)
        tasks = parse_task_list(data)
    except (ApiError, ValueError) as e:
        logger.warning("Import from %s failed: %s", url, e)
        error(f"Import failed: {e}")
        return 1
    finally:
        if owns_client:
            client.close()

    repository.save_all(tasks)
    logger.info("Imported %d tasks from %s", len(tasks), url)
    success(f"Imported {len(tasks)} tasks")
    return 0
