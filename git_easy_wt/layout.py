"""Filesystem layout helpers for git-easy-wt."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from .exceptions import ValidationError
from .models import WorkspaceLayout

BARE_DIR_NAME = ".bare"

# Last path segment, with an optional trailing .git removed.
_REPO_NAME_RE = re.compile(r"/([^/]+?)(?:\.git)?$")


def repo_name_from_url(url: str) -> str:
    match = _REPO_NAME_RE.search(url.strip())
    if not match:
        raise ValidationError(f"Invalid Git URL. Could not extract repository name from {url!r}.")
    return match.group(1)


def plan_layout(url: str, base_dir: Path, branches: Sequence[str]) -> WorkspaceLayout:
    """Compute where the bare repository and each worktree live. Pure path math."""

    repo_name = repo_name_from_url(url)
    repo_dir = base_dir / repo_name
    return WorkspaceLayout(
        repo_name=repo_name,
        repo_dir=repo_dir,
        bare_repo_path=repo_dir / BARE_DIR_NAME,
        worktree_paths={branch: repo_dir / branch for branch in branches},
    )


def ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


__all__ = ["BARE_DIR_NAME", "repo_name_from_url", "plan_layout", "ensure_directory"]
