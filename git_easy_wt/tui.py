"""Full-screen form for collecting workspace inputs, built on textual."""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import Button, Input, Label, Static

from .exceptions import CancelledError
from .inputs import RawInputs

HINT = "[dim]Tab/Shift+Tab switch focus · Enter submit · Esc cancel[/dim]"

# (input id, label, message shown when left blank)
FIELDS = (
    ("url", "Repository URL", "Repository URL is required."),
    ("branch", "Branch", "Branch is required."),
    ("directory", "Base Dir", "Base directory is required."),
)


def first_missing_field(values: dict[str, str]) -> tuple[str, str] | None:
    """Return ``(field id, error message)`` for the first blank field."""

    for field_id, _, message in FIELDS:
        if not values.get(field_id, "").strip():
            return field_id, message
    return None


class WorkspaceForm(App[RawInputs]):
    TITLE = "Git Easy WT"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #form {
        border: round $primary;
        padding: 1 2;
        height: auto;
    }
    .row {
        height: 3;
    }
    .row Label {
        width: 18;
        padding: 1 0;
        color: $accent;
    }
    .row Input {
        width: 1fr;
    }
    #buttons {
        height: 3;
        margin-top: 1;
    }
    #message {
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("ctrl+c", "cancel", "Cancel", priority=True),
        Binding("ctrl+s", "submit", "Submit"),
    ]

    def __init__(self, initial: RawInputs) -> None:
        super().__init__()
        self.initial = initial
        self.error: str | None = None

    def compose(self) -> ComposeResult:
        values = {
            "url": self.initial.url or "",
            "branch": self.initial.branch or "",
            "directory": self.initial.directory or str(Path.cwd()),
        }
        with Container(id="form"):
            yield Static("[bold]Git Easy Worktree[/bold]  |  Fill values and press Enter to continue")
            for field_id, label, _ in FIELDS:
                with Horizontal(classes="row"):
                    yield Label(label)
                    yield Input(value=values[field_id], id=field_id)
            with Horizontal(id="buttons"):
                yield Button("Submit", id="submit", variant="success")
                yield Button("Cancel", id="cancel", variant="error")
            yield Static(HINT, id="message")

    def on_mount(self) -> None:
        self.query_one("#url", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        order = [field_id for field_id, _, _ in FIELDS]
        index = order.index(event.input.id)
        if index + 1 < len(order):
            self.query_one(f"#{order[index + 1]}", Input).focus()
        else:
            self.action_submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit":
            self.action_submit()
        else:
            self.action_cancel()

    def action_submit(self) -> None:
        values = {field_id: self.query_one(f"#{field_id}", Input).value.strip() for field_id, _, _ in FIELDS}
        missing = first_missing_field(values)
        if missing:
            field_id, message = missing
            self.error = message
            self.query_one("#message", Static).update(f"[red]{message}[/red]")
            self.query_one(f"#{field_id}", Input).focus()
            return
        self.exit(RawInputs(url=values["url"], branch=values["branch"], directory=values["directory"]))

    def action_cancel(self) -> None:
        self.exit(None)


class FormCollector:
    """Collects every field at once in a full-screen form."""

    def collect(self, known: RawInputs) -> RawInputs:
        result = WorkspaceForm(known).run()
        if result is None:
            raise CancelledError()
        return result


__all__ = ["FIELDS", "first_missing_field", "WorkspaceForm", "FormCollector"]
