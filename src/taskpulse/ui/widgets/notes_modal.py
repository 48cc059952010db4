"""Notes pad modal."""

from datetime import datetime

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, TextArea


def notes_title(last_saved: datetime | None) -> str:
    """Modal heading, with the last save time when known."""
    if last_saved is None:
        return "Notes"
    return f"Notes (saved {last_saved.strftime('%Y-%m-%d %H:%M %Z').strip()})"


class NotesModal(ModalScreen[str | None]):
    """Editable notes pad. Dismisses with the new text, or None on cancel."""

    DEFAULT_CSS = """
    NotesModal {
        align: center middle;
    }

    NotesModal > Vertical {
        width: 80%;
        height: 70%;
        padding: 1 2;
        background: $surface;
        border: solid $success;
    }

    NotesModal .notes-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    NotesModal TextArea {
        height: 1fr;
    }

    NotesModal .notes-hint {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "save", "Save"),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, text: str, last_saved: datetime | None = None) -> None:
        super().__init__()
        self.text = text
        self.last_saved = last_saved

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(notes_title(self.last_saved), classes="notes-title")
            yield TextArea(self.text, id="notes-text")
            yield Label("ctrl+s save  |  esc cancel", classes="notes-hint")

    def on_mount(self) -> None:
        self.query_one("#notes-text", TextArea).focus()

    def action_save(self) -> None:
        self.dismiss(self.query_one("#notes-text", TextArea).text)

    def action_cancel(self) -> None:
        self.dismiss(None)
