"""CLI entry point for taskpulse."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="taskpulse",
        description="Terminal task dashboard with progress columns and deadline alerts",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Path to project root containing taskpulse.yml (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--generate",
        action="store_true",
        help="Generate default taskpulse.yml and data directory, then exit",
    )
    commands.add_argument(
        "--summary",
        action="store_true",
        help="Print the board and task counts, then exit",
    )
    commands.add_argument(
        "--alerts",
        action="store_true",
        help="Print tasks due today or tomorrow, then exit (exit code 1 if any)",
    )
    commands.add_argument(
        "--import-url",
        metavar="URL",
        default=None,
        help="Replace local tasks with the JSON task list served at URL, then exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # CLI arguments override environment settings
    overrides: dict = {"verbose": args.verbose}
    if args.project_root is not None:
        overrides["project_root"] = args.project_root
    if args.log_file is not None:
        overrides["log_file"] = args.log_file
    settings = Settings(**overrides)

    setup_logging(settings.verbose, settings.log_file)

    if args.generate:
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.project_root))

    if args.summary or args.alerts or args.import_url:
        from .repositories import FileStore, TaskRepository
        from .services import BoardService, ConfigService

        config_service = ConfigService(settings.project_root)
        config = config_service.get_config()
        repository = TaskRepository(FileStore(config_service.data_root), config.storage.tasks_key)
        board_service = BoardService(repository, config_service)

        if args.summary:
            from .cli.summary import run_summary

            raise SystemExit(run_summary(board_service))

        if args.alerts:
            from .cli.summary import run_alerts

            raise SystemExit(run_alerts(board_service, config.notifications.timezone))

        from .cli.import_tasks import run_import

        raise SystemExit(run_import(args.import_url, repository))

    # Import here to keep the non-interactive commands free of Textual
    from .app import run

    raise SystemExit(run(settings))


if __name__ == "__main__":
    main()
