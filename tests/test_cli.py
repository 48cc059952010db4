"""Tests for the non-interactive commands and argument parsing."""

from datetime import date
from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml
from rich.console import Console

from taskpulse.__main__ import main, parse_args
from taskpulse.api import ApiNotFoundError
from taskpulse.cli.generate import (
    CONFIG_FILE,
    _is_valid_data_root,
    generate_config_yaml,
    run_generate,
)
from taskpulse.cli.import_tasks import parse_task_list, run_import
from taskpulse.cli.summary import (
    BAR_CHAR,
    ConsoleAlertSink,
    build_summary_table,
    render_bar,
    run_alerts,
    run_summary,
)
from taskpulse.models import BoardSummary, Notification, Severity, Task, TaskpulseConfig
from taskpulse.repositories import MemoryStore, TaskRepository
from taskpulse.services import BoardService

TODAY = date(2026, 10, 18)


@pytest.fixture
def repo() -> TaskRepository:
    repo = TaskRepository(MemoryStore())
    repo.save_all(
        [
            Task(id=1, title="Plan", progress=10, deadline=TODAY),
            Task(id=2, title="Build", progress=50, deadline=date(2026, 10, 19)),
            Task(id=3, title="Ship", progress=90),
        ]
    )
    return repo


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def console(output: StringIO) -> Console:
    return Console(file=output, width=120, color_system=None)


class TestRenderBar:
    """Tests for render_bar."""

    def test_scaled_to_largest(self):
        assert render_bar(10, 10, width=20) == BAR_CHAR * 20
        assert render_bar(5, 10, width=20) == BAR_CHAR * 10

    def test_small_counts_still_visible(self):
        assert render_bar(1, 1000, width=20) == BAR_CHAR

    def test_zero(self):
        assert render_bar(0, 10) == ""
        assert render_bar(0, 0) == ""


class TestSummaryCommand:
    """Tests for the summary command."""

    def test_summary_table_counts(self, console: Console, output: StringIO):
        console.print(build_summary_table(BoardSummary(todo=2, in_progress=0, completed=5)))

        text = output.getvalue()
        assert "Task Analytics" in text
        assert "To Do" in text
        assert "Total" in text
        assert "7" in text

    def test_run_summary(self, repo: TaskRepository, console: Console, output: StringIO):
        assert run_summary(BoardService(repo), console) == 0

        text = output.getvalue()
        assert "Plan" in text
        assert "In Progress (1)" in text
        assert "Completed (1)" in text

    def test_titles_with_markup_printed_literally(self, console: Console, output: StringIO):
        repo = TaskRepository(MemoryStore())
        repo.save_all([Task(id=1, title="[bold]Loud[/bold]", progress=0)])

        run_summary(BoardService(repo), console)

        assert "[bold]Loud[/bold]" in output.getvalue()


class TestAlertsCommand:
    """Tests for the alerts command."""

    def test_alerts_printed_in_order(self, repo, console: Console, output: StringIO):
        with patch("taskpulse.cli.summary.today_in", return_value=TODAY):
            code = run_alerts(BoardService(repo), "UTC", console)

        text = output.getvalue()
        assert code == 1
        assert text.index('Task Due Today: "Plan"') < text.index('Task Due Tomorrow: "Build"')

    def test_no_alerts(self, repo, console: Console, output: StringIO):
        with patch("taskpulse.cli.summary.today_in", return_value=date(2027, 1, 1)):
            code = run_alerts(BoardService(repo), "UTC", console)

        assert code == 0
        assert "No tasks due today or tomorrow." in output.getvalue()

    def test_console_sink_rings_bell(self):
        console = MagicMock()
        sink = ConsoleAlertSink(console)

        sink.render(Notification(task_id=1, title="Report", severity=Severity.DUE_TODAY))
        sink.play_cue()

        assert 'Task Due Today: "Report"' in console.print.call_args[0][0]
        console.bell.assert_called_once()


class TestImportCommand:
    """Tests for the import command."""

    def test_parse_bare_list(self):
        tasks = parse_task_list([{"id": 1, "title": "One", "progress": 20}])
        assert [t.title for t in tasks] == ["One"]

    def test_parse_wrapped_list(self):
        tasks = parse_task_list({"tasks": [{"id": "a", "title": "A"}]})
        assert [t.id for t in tasks] == ["a"]

    def test_parse_rejects_other_shapes(self):
        with pytest.raises(ValueError, match="task list"):
            parse_task_list({"items": []})

    def test_parse_rejects_invalid_record(self):
        with pytest.raises(ValueError, match="Invalid task record"):
            parse_task_list([{"id": 1, "title": "Bad", "progress": 150}])

    def test_import_replaces_tasks(self, repo: TaskRepository):
        client = MagicMock()
        client.fetch_json.return_value = [{"id": 7, "title": "Remote", "progress": 85}]

        assert run_import("https://dashboard.test/tasks", repo, client) == 0

        assert [t.id for t in repo.load_all()] == [7]
        client.close.assert_not_called()

    def test_import_failure_keeps_local_tasks(self, repo: TaskRepository):
        client = MagicMock()
        client.fetch_json.side_effect = ApiNotFoundError("Not found", 404)

        assert run_import("https://dashboard.test/missing", repo, client) == 1

        assert [t.id for t in repo.load_all()] == [1, 2, 3]

    def test_import_bad_payload_keeps_local_tasks(self, repo: TaskRepository):
        client = MagicMock()
        client.fetch_json.return_value = {"error": "nope"}

        assert run_import("https://dashboard.test/tasks", repo, client) == 1
        assert len(repo.load_all()) == 3


class TestGenerateConfigYaml:
    """Tests for generate_config_yaml function."""

    def test_generates_valid_yaml(self):
        parsed = yaml.safe_load(generate_config_yaml())

        assert parsed["version"] == 1
        assert parsed["data_root"] == ".taskpulse"
        assert parsed["board"]["thresholds"] == {"todo_max": 40, "in_progress_max": 80}

    def test_custom_data_root(self):
        assert yaml.safe_load(generate_config_yaml("board-data"))["data_root"] == "board-data"

    def test_includes_header_comments(self):
        assert generate_config_yaml().startswith("# taskpulse Dashboard Configuration")

    def test_round_trips_through_model(self):
        parsed = yaml.safe_load(generate_config_yaml())
        assert TaskpulseConfig(**parsed) == TaskpulseConfig.default()


class TestIsValidDataRoot:
    """Tests for _is_valid_data_root validation."""

    def test_relative_paths(self, tmp_path: Path):
        assert _is_valid_data_root(".taskpulse", tmp_path) is True
        assert _is_valid_data_root("sub/dir", tmp_path) is True

    def test_absolute_path(self, tmp_path: Path):
        assert _is_valid_data_root("/etc", tmp_path) is False

    def test_escaping_path(self, tmp_path: Path):
        assert _is_valid_data_root("../outside", tmp_path) is False


class TestRunGenerate:
    """Tests for run_generate."""

    def test_creates_config_and_directory(self, tmp_path: Path):
        assert run_generate(tmp_path) == 0

        assert (tmp_path / CONFIG_FILE).exists()
        assert (tmp_path / ".taskpulse").is_dir()

    def test_nothing_to_generate(self, tmp_path: Path, capsys):
        run_generate(tmp_path)

        assert run_generate(tmp_path) == 1
        assert "Nothing to generate." in capsys.readouterr().out

    def test_existing_config_data_root_respected(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).write_text("data_root: custom\n")

        assert run_generate(tmp_path) == 0
        assert (tmp_path / "custom").is_dir()

    def test_invalid_data_root(self, tmp_path: Path):
        assert run_generate(tmp_path, "../outside") == 1
        assert not (tmp_path / CONFIG_FILE).exists()


class TestParseArgs:
    """Tests for command line parsing."""

    def test_defaults(self):
        args = parse_args([])

        assert args.project_root is None
        assert args.verbose == 0
        assert not args.generate
        assert not args.summary
        assert args.import_url is None

    def test_verbosity_counts(self):
        assert parse_args(["-vv"]).verbose == 2

    def test_commands_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["--summary", "--alerts"])

    def test_import_url(self):
        assert parse_args(["--import-url", "https://x.test/t"]).import_url == "https://x.test/t"


class TestMain:
    """Tests for the entry point dispatch."""

    def test_generate(self, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--project-root", str(tmp_path), "--generate"])

        assert exc_info.value.code == 0
        assert (tmp_path / CONFIG_FILE).exists()

    def test_summary_reads_data_root(self, tmp_path: Path, capsys):
        data = tmp_path / ".taskpulse"
        data.mkdir()
        (data / "tasks.yaml").write_text("- {id: 1, title: Stored task, progress: 30}\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["--project-root", str(tmp_path), "--summary"])

        assert exc_info.value.code == 0
        assert "Stored task" in capsys.readouterr().out
