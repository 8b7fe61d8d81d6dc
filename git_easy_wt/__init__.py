"""git-easy-wt: bare clone plus one worktree per branch, from a repository URL."""

from importlib import metadata

DISTRIBUTION = "git-easy-wt"

try:  # pragma: no cover - best effort metadata lookup
    __version__ = metadata.version(DISTRIBUTION)
except metadata.PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

__all__ = ["DISTRIBUTION", "__version__"]
