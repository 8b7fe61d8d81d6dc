"""Progress reporting sinks for provisioning runs."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.status import Status

from .models import Phase, PhaseEvent, PhaseStatus, ProvisionReport


class Reporter(Protocol):
    def phase(self, event: PhaseEvent) -> None: ...

    def progress(self, line: str) -> None: ...

    def summary(self, report: ProvisionReport) -> None: ...


class RecordingReporter:
    """Keeps everything in memory; used by tests and non-terminal callers."""

    def __init__(self) -> None:
        self.events: list[PhaseEvent] = []
        self.lines: list[str] = []
        self.reports: list[ProvisionReport] = []

    def phase(self, event: PhaseEvent) -> None:
        self.events.append(event)

    def progress(self, line: str) -> None:
        self.lines.append(line)

    def summary(self, report: ProvisionReport) -> None:
        self.reports.append(report)

    def phases(self, status: PhaseStatus | None = None) -> list[Phase]:
        return [event.phase for event in self.events if status is None or event.status == status]


class ConsoleReporter:
    """Spinner and status lines on stdout, failures on stderr."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self._status: Status | None = None
        self._label = ""

    def welcome(self) -> None:
        self.console.print(
            Panel(
                "[cyan]Welcome to Git Easy Worktree![/cyan]\nLet's set up your workspace.",
                border_style="cyan",
                padding=(1, 2),
            )
        )

    def phase(self, event: PhaseEvent) -> None:
        if event.status == PhaseStatus.START:
            self._start(event.detail)
            return
        self.close()
        if event.status == PhaseStatus.SUCCESS:
            self.console.print(f"[green]✓[/green] {escape(event.detail)}")
        else:
            self.err_console.print(f"[red]✗[/red] {escape(event.detail)}", highlight=False, soft_wrap=True)

    def progress(self, line: str) -> None:
        if self._status is not None:
            self._status.update(f"{escape(self._label)} [dim]{escape(line)}[/dim]")

    def summary(self, report: ProvisionReport) -> None:
        self.close()
        succeeded = report.succeeded
        if succeeded:
            rows = "\n".join(
                f"📂 Worktree: [cyan]{escape(str(result.worktree_path))}[/cyan]\n🌿 Branch:   [cyan]{escape(result.branch)}[/cyan]"
                for result in succeeded
            )
            hint = _relative_hint(succeeded[0].worktree_path)
            title = "[green]🎉 All done![/green]" if report.ok else "[yellow]Finished with errors[/yellow]"
            self.console.print()
            self.console.print(
                Panel(f"{title}\n\n{rows}\n\n[dim]cd {escape(hint)}[/dim]", border_style="green", padding=(1, 2))
            )

    def _start(self, label: str) -> None:
        self.close()
        self._label = label
        self._status = self.console.status(escape(label))
        self._status.start()

    def close(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None


def _relative_hint(path: Path) -> str:
    try:
        return os.path.relpath(path, Path.cwd())
    except ValueError:  # pragma: no cover - different drive on Windows
        return str(path)


__all__ = ["Reporter", "RecordingReporter", "ConsoleReporter"]
