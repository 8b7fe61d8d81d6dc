"""Custom error hierarchy for git-easy-wt."""

from __future__ import annotations

from pathlib import Path


class GitEasyWtError(RuntimeError):
    """Base error for the CLI."""


class ValidationError(GitEasyWtError):
    """Raised when user input is missing or malformed."""


class GitOperationError(GitEasyWtError):
    """Raised when clone, fetch or worktree add fails."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        super().__init__(self.summary)

    @property
    def summary(self) -> str:
        message = f"git command failed (exit {self.returncode}): {' '.join(self.command)}"
        detail = _detail_line(self.stderr) or _detail_line(self.stdout)
        if detail:
            message = f"{message}: {detail}"
        return message


class PathConflictError(GitEasyWtError):
    """Raised when a worktree directory is already present on disk."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Worktree path {path} already exists.")


class CancelledError(GitEasyWtError):
    """Raised when the user aborts an interactive flow."""

    def __init__(self, message: str = "Cancelled by user."):
        super().__init__(message)


def _detail_line(text: str) -> str:
    # git prints hints after the actual error; prefer lines starting with fatal/error.
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    for line in lines:
        if line.lower().startswith(("fatal:", "error:")):
            return line
    return lines[-1] if lines else ""


__all__ = [
    "GitEasyWtError",
    "ValidationError",
    "GitOperationError",
    "PathConflictError",
    "CancelledError",
]
