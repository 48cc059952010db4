"""Analytics bar: task counts per column."""

from textual.widgets import Static

from ...models import BoardSummary, Column

COLUMN_COLORS: dict[Column, str] = {
    Column.TODO: "#FF6384",
    Column.IN_PROGRESS: "#FFCE56",
    Column.COMPLETED: "#36A2EB",
}

BAR_WIDTH = 12


def format_summary(summary: BoardSummary, width: int = BAR_WIDTH) -> str:
    """Render counts as one markup line with a small bar per column."""
    largest = max((summary.count(column) for column in Column), default=0)
    parts: list[str] = []
    for column in Column:
        count = summary.count(column)
        filled = round(width * count / largest) if largest else 0
        bar = "█" * filled + " " * (width - filled)
        parts.append(f"{column.display_title} [{COLUMN_COLORS[column]}]{bar}[/] {count}")
    return "  ".join(parts) + f"  [dim]| {summary.total} total[/]"


class SummaryBar(Static):
    """One-line task analytics shown under the board."""

    def show(self, summary: BoardSummary) -> None:
        self.update(format_summary(summary))
