"""Status column widget."""

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Static

from ...models import Column, Task
from .task_card import TaskCard


def card_id(column: Column, index: int) -> str:
    """Widget id for the card at ``index`` in ``column``: "card-in-progress-0".

    Ids follow card position, so any two task ids get distinct widgets.
    """
    return f"card-{column.value.replace('_', '-')}-{index}"


class TaskListScroll(VerticalScroll):
    """Card list that lets the vertical navigation keys reach the App."""

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()


class EmptyColumnMessage(Static):
    """Placeholder shown in a column without tasks."""


class KanbanColumn(Widget):
    """One progress column: a header with the count and a list of cards."""

    def __init__(self, column: Column, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.column = column
        self._tasks: list[Task] = []

    @property
    def _slug(self) -> str:
        return self.column.value.replace("_", "-")

    @property
    def _header_text(self) -> str:
        return f"{self.column.display_title} [dim]({len(self._tasks)})[/]"

    def compose(self) -> ComposeResult:
        yield Static(self._header_text, classes="column-header", id=f"header-{self._slug}")
        yield TaskListScroll(classes="column-content", id=f"content-{self._slug}")

    def on_mount(self) -> None:
        if self._tasks:
            self.call_after_refresh(self._rebuild_cards)

    def set_tasks(self, tasks: list[Task]) -> None:
        """Replace the column's tasks; cards are rebuilt after the next refresh."""
        self._tasks = list(tasks)
        self.call_after_refresh(self._rebuild_cards)

    async def _rebuild_cards(self) -> None:
        try:
            content = self.query_one(f"#content-{self._slug}", TaskListScroll)
            header = self.query_one(f"#header-{self._slug}", Static)
        except NoMatches:
            self.log.warning(f"Column {self.column.value} is not composed yet")
            return

        await content.remove_children()
        if self._tasks:
            today = getattr(self.app, "today", None)
            await content.mount_all(
                TaskCard(task, today=today, id=card_id(self.column, index))
                for index, task in enumerate(self._tasks)
            )
        else:
            await content.mount(EmptyColumnMessage("Nothing here"))

        header.update(self._header_text)

    @property
    def tasks(self) -> list[Task]:
        return self._tasks

    @property
    def task_count(self) -> int:
        return len(self._tasks)

    def get_task(self, index: int) -> Task | None:
        """Task at ``index``, or None when out of range."""
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

    def focus_task(self, index: int) -> bool:
        """
        Focus the card at ``index`` and scroll it into view.

        Returns:
            True if a card was focused, False otherwise
        """
        if self.get_task(index) is None:
            return False
        try:
            card = self.query_one(f"#{card_id(self.column, index)}", TaskCard)
        except NoMatches:
            return False
        card.focus()
        card.scroll_visible()
        return True
