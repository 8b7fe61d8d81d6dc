"""Thin wrappers around the git CLI."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Sequence

from .exceptions import GitOperationError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


def run_git(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    executable: str = "git",
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    command = [executable, *args]
    logger.debug("Running command: %s", " ".join(command))
    try:
        result = subprocess.run(
            command,
            cwd=str(cwd) if cwd else None,
            text=True,
            errors="replace",
            capture_output=True,
        )
    except FileNotFoundError as exc:
        raise GitOperationError(command, 127, stderr=str(exc)) from exc
    if check and result.returncode != 0:
        raise GitOperationError(command, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result


def stream_git(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    executable: str = "git",
    on_line: ProgressCallback | None = None,
) -> str:
    """Run git, handing each output line to ``on_line`` as it arrives.

    stderr is merged into stdout so a single reader cannot deadlock. Text mode
    turns the carriage returns git uses for progress updates into newlines.
    """

    command = [executable, *args]
    logger.debug("Running command: %s", " ".join(command))
    try:
        proc = subprocess.Popen(
            command,
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
    except FileNotFoundError as exc:
        raise GitOperationError(command, 127, stderr=str(exc)) from exc

    lines: list[str] = []
    with proc:
        assert proc.stdout is not None
        try:
            for raw in proc.stdout:
                line = raw.rstrip()
                if not line:
                    continue
                lines.append(line)
                logger.debug("git: %s", line)
                if on_line:
                    on_line(line)
        except BaseException:
            # callback error or Ctrl-C: stop git before the context manager waits on it
            proc.kill()
            raise
        returncode = proc.wait()
    output = "\n".join(lines)
    if returncode != 0:
        raise GitOperationError(command, returncode, stderr=output)
    return output


@dataclass(frozen=True, slots=True)
class GitBackend:
    """git CLI bound to an optional working directory."""

    executable: str = "git"
    cwd: Path | None = None

    def at(self, path: Path) -> GitBackend:
        return replace(self, cwd=path)

    def clone(
        self,
        url: str,
        dest: Path,
        *,
        bare: bool = False,
        progress: ProgressCallback | None = None,
    ) -> None:
        args = ["clone", "--progress"]
        if bare:
            args.append("--bare")
        args.extend([url, str(dest)])
        stream_git(args, cwd=self.cwd, executable=self.executable, on_line=progress)

    def fetch(self, remote: str = "origin", *, progress: ProgressCallback | None = None) -> None:
        stream_git(["fetch", "--progress", remote], cwd=self.cwd, executable=self.executable, on_line=progress)

    def raw(self, args: Sequence[str]) -> str:
        return run_git(args, cwd=self.cwd, executable=self.executable).stdout


__all__ = ["GitBackend", "ProgressCallback", "run_git", "stream_git"]
