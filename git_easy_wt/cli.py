"""Typer CLI entrypoint for git-easy-wt."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import DISTRIBUTION, __version__
from .branches import split_branch_tokens
from .config import UiMode, is_interactive, load_settings, parse_ui_mode
from .exceptions import CancelledError, GitEasyWtError
from .git import GitBackend
from .inputs import InputCollector, resolve_inputs
from .interactive import LinePromptCollector
from .provision import provision_workspace
from .reporter import ConsoleReporter
from .tui import FormCollector

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Create git worktrees from a repository URL and branch names.",
)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{DISTRIBUTION} {__version__}")
        raise typer.Exit()


@app.command()
def main(
    url: Optional[str] = typer.Argument(None, help="Git repository URL."),
    branches: Optional[List[str]] = typer.Argument(
        None,
        help="Branch name(s) to check out. Separate with spaces or commas.",
        show_default=False,
    ),
    directory: Optional[Path] = typer.Option(
        None,
        "--dir",
        "-d",
        help="Base directory for worktrees (defaults to $GIT_WT_DIR or the current directory).",
        file_okay=False,
        dir_okay=True,
    ),
    ui: Optional[str] = typer.Option(
        None,
        "--ui",
        help="How to ask for missing values: 'prompt' or 'form' (defaults to $GIT_WT_UI or prompt).",
    ),
    interactive: bool = typer.Option(
        True,
        "--interactive/--no-interactive",
        help="Allow prompting for missing values when attached to a terminal.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-easy-wt version and exit.",
    ),
) -> None:
    """Clone URL as a bare repository and add one worktree per branch."""

    _ = version  # handled via callback
    configure_logging(verbose)
    reporter = ConsoleReporter()
    try:
        settings = load_settings()
        ui_mode = parse_ui_mode(ui) if ui else settings.ui
        collector = _select_collector(ui_mode) if interactive and is_interactive() else None
        if collector is not None and (not (url or "").strip() or not split_branch_tokens(branches or [])):
            reporter.welcome()
        inputs = resolve_inputs(
            url,
            branches,
            str(directory) if directory else None,
            collector=collector,
            default_dir=settings.default_dir,
        )
        report = provision_workspace(inputs, GitBackend(executable=settings.git_executable), reporter)
    except (CancelledError, KeyboardInterrupt) as exc:
        reporter.close()
        logger.debug("Cancelled", exc_info=verbose)
        message = str(exc) if isinstance(exc, CancelledError) else str(CancelledError())
        _fail(message, code=130)
    except GitEasyWtError as exc:
        reporter.close()
        logger.debug("Provisioning failed", exc_info=verbose)
        _fail(f"Error: {exc}")

    if not report.ok:
        failed = len(report.failed)
        _fail(f"Error: {failed} of {len(report.results)} worktree(s) could not be created.")


def _select_collector(mode: UiMode) -> InputCollector:
    if mode is UiMode.FORM:
        return FormCollector()
    return LinePromptCollector()


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


__all__ = ["app", "main", "configure_logging"]


if __name__ == "__main__":
    app()
