"""Summary and alerts commands: non-interactive views of the board."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import Board, BoardSummary, Column, Notification, Severity
from ..services import BoardService, NotificationService
from ..utils import today_in

BAR_CHAR = "\u2588"  # █
BAR_WIDTH = 30

COLUMN_STYLES: dict[Column, str] = {
    Column.TODO: "red",
    Column.IN_PROGRESS: "yellow",
    Column.COMPLETED: "blue",
}

SEVERITY_STYLES: dict[Severity, str] = {
    Severity.DUE_TODAY: "bold white on red",
    Severity.DUE_TOMORROW: "black on yellow",
}


def render_bar(count: int, largest: int, width: int = BAR_WIDTH) -> str:
    """Bar of block glyphs scaled against the largest column."""
    if count <= 0 or largest <= 0:
        return ""
    return BAR_CHAR * max(1, round(width * count / largest))


def build_summary_table(summary: BoardSummary) -> Table:
    """Task counts as a table with a bar per column."""
    table = Table(title="Task Analytics", show_footer=True)
    table.add_column("Column", footer="Total")
    table.add_column("Tasks", justify="right", footer=str(summary.total))
    table.add_column("")

    largest = max(summary.count(column) for column in Column)
    for column in Column:
        count = summary.count(column)
        bar = render_bar(count, largest)
        table.add_row(column.display_title, str(count), f"[{COLUMN_STYLES[column]}]{bar}[/]")
    return table


def build_board_table(board: Board) -> Table:
    """Board columns side by side, one task title per row."""
    table = Table(title="Board")
    columns = board.visible_columns()
    for column, tasks in columns:
        table.add_column(f"{column.display_title} ({len(tasks)})")

    depth = max((len(tasks) for _column, tasks in columns), default=0)
    for row in range(depth):
        cells = []
        for _column, tasks in columns:
            if row < len(tasks):
                task = tasks[row]
                cells.append(f"{escape(task.title)} [dim]{task.progress_label}[/]")
            else:
                cells.append("")
        table.add_row(*cells)
    return table


class ConsoleAlertSink:
    """Alert sink printing one line per alert and ringing the terminal bell."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def render(self, event: Notification) -> None:
        style = SEVERITY_STYLES[event.severity]
        self.console.print(f"[{style}] {escape(event.message)} [/]")

    def play_cue(self) -> None:
        self.console.bell()


def run_summary(board_service: BoardService, console: Console | None = None) -> int:
    """
    Print the board and the per-column counts.

    Returns:
        Exit code (always 0)
    """
    console = console or Console()
    board = board_service.load_board()
    console.print(build_board_table(board))
    console.print(build_summary_table(board.summary()))
    return 0


def run_alerts(
    board_service: BoardService,
    timezone: str = "UTC",
    console: Console | None = None,
) -> int:
    """
    Print deadline alerts for today and tomorrow.

    Returns:
        Exit code (0 = no alerts, 1 = something is due)
    """
    console = console or Console()
    tasks = board_service.repository.load_all()
    service = NotificationService(ConsoleAlertSink(console))
    events = service.notify(tasks, today_in(timezone))
    if not events:
        console.print("No tasks due today or tomorrow.")
        return 0
    return 1
