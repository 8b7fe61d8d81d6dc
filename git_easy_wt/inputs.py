"""Turn CLI arguments and prompt answers into validated workspace inputs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from .branches import parse_branches, split_branch_tokens
from .exceptions import ValidationError
from .layout import repo_name_from_url
from .models import WorkspaceInputs

NON_INTERACTIVE_MESSAGE = "Missing required arguments in non-interactive mode"


@dataclass(slots=True)
class RawInputs:
    """Unvalidated fields, any of which may still be missing."""

    url: str | None = None
    branch: str | None = None
    directory: str | None = None


class InputCollector(Protocol):
    """Asks the user for whatever ``known`` is missing and returns all fields."""

    def collect(self, known: RawInputs) -> RawInputs: ...


def resolve_inputs(
    url: str | None,
    branch_tokens: Sequence[str] | None,
    directory: str | None = None,
    *,
    collector: InputCollector | None = None,
    default_dir: Path | None = None,
) -> WorkspaceInputs:
    """Validate the inputs, asking ``collector`` for missing ones.

    Without a collector the caller is not attached to a terminal, so missing
    fields are an immediate :class:`ValidationError`.
    """

    url = _clean(url)
    tokens = [token.strip() for token in branch_tokens or [] if token and token.strip()]
    directory = _clean(directory)

    known_branches = split_branch_tokens(tokens)
    if not url or not known_branches:
        if collector is None:
            raise ValidationError(NON_INTERACTIVE_MESSAGE)
        fallback_dir = directory or str(default_dir or Path.cwd())
        answers = collector.collect(
            RawInputs(url=url or None, branch=" ".join(known_branches) or None, directory=fallback_dir)
        )
        url = _clean(answers.url)
        tokens = [_clean(answers.branch)]
        directory = _clean(answers.directory) or directory

    if not url:
        raise ValidationError("Repository URL is required.")
    branches = parse_branches(tokens)
    repo_name_from_url(url)
    base_dir = Path(directory) if directory else (default_dir or Path.cwd())
    return WorkspaceInputs(url=url, branches=tuple(branches), base_dir=base_dir.expanduser().resolve())


def _clean(value: str | None) -> str:
    return (value or "").strip()


__all__ = ["NON_INTERACTIVE_MESSAGE", "RawInputs", "InputCollector", "resolve_inputs"]
