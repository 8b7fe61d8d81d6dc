"""Shared dataclasses used throughout the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True, slots=True)
class WorkspaceInputs:
    """Validated user input: what to clone, which branches, and where."""

    url: str
    branches: tuple[str, ...]
    base_dir: Path


@dataclass(frozen=True, slots=True)
class WorkspaceLayout:
    """Filesystem locations derived from a repository URL and base directory."""

    repo_name: str
    repo_dir: Path
    bare_repo_path: Path
    worktree_paths: dict[str, Path] = field(hash=False)

    def worktree_path(self, branch: str) -> Path:
        return self.worktree_paths[branch]


class Phase(str, Enum):
    CHECKING = "checking"
    FETCHING = "fetching"
    CLONING = "cloning"
    CREATING_WORKTREE = "creating-worktree"
    CREATING_BRANCH = "creating-branch"


class PhaseStatus(str, Enum):
    START = "start"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class PhaseEvent:
    phase: Phase
    status: PhaseStatus
    detail: str


@dataclass(frozen=True, slots=True)
class BranchResult:
    """Outcome of provisioning a single worktree."""

    branch: str
    worktree_path: Path
    error: str | None = None
    created_branch: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def outcome(self) -> str:
        return "success" if self.ok else f"failed({self.error})"


@dataclass(frozen=True, slots=True)
class ProvisionReport:
    layout: WorkspaceLayout
    results: tuple[BranchResult, ...]

    @property
    def ok(self) -> bool:
        return all(result.ok for result in self.results)

    @property
    def succeeded(self) -> list[BranchResult]:
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> list[BranchResult]:
        return [result for result in self.results if not result.ok]


__all__ = [
    "WorkspaceInputs",
    "WorkspaceLayout",
    "Phase",
    "PhaseStatus",
    "PhaseEvent",
    "BranchResult",
    "ProvisionReport",
]
