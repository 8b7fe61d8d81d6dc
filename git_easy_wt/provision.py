"""Core business logic: bare repository provisioning and worktree creation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Sequence

from .exceptions import GitOperationError, PathConflictError
from .git import ProgressCallback
from .layout import ensure_directory, plan_layout
from .models import (
    BranchResult,
    Phase,
    PhaseEvent,
    PhaseStatus,
    ProvisionReport,
    WorkspaceInputs,
    WorkspaceLayout,
)
from .reporter import Reporter

logger = logging.getLogger(__name__)

# Substrings git prints when `worktree add <path> <branch>` names an unknown branch.
BRANCH_NOT_FOUND_MARKERS = ("invalid reference", "not a valid object name")


class GitClient(Protocol):
    def at(self, path: Path) -> GitClient: ...

    def clone(
        self,
        url: str,
        dest: Path,
        *,
        bare: bool = False,
        progress: ProgressCallback | None = None,
    ) -> None: ...

    def fetch(self, remote: str = "origin", *, progress: ProgressCallback | None = None) -> None: ...

    def raw(self, args: Sequence[str]) -> str: ...


def is_branch_not_found(error: GitOperationError) -> bool:
    text = f"{error.stderr}\n{error.stdout}".lower()
    return any(marker in text for marker in BRANCH_NOT_FOUND_MARKERS)


def ensure_bare_repository(url: str, layout: WorkspaceLayout, git: GitClient, reporter: Reporter) -> None:
    """Clone ``url`` as a bare repository, or fetch origin if it is already there."""

    bare_path = layout.bare_repo_path
    if bare_path.exists():
        _emit(reporter, Phase.CHECKING, PhaseStatus.START, f"Checking bare repository at {bare_path}")
        _emit(reporter, Phase.CHECKING, PhaseStatus.SUCCESS, "Bare repository found")
        _emit(reporter, Phase.FETCHING, PhaseStatus.START, "Fetching latest updates from remote...")
        try:
            git.at(bare_path).fetch("origin", progress=reporter.progress)
        except GitOperationError as exc:
            _emit(reporter, Phase.FETCHING, PhaseStatus.FAILURE, f"Fetch failed: {exc}")
            raise
        _emit(reporter, Phase.FETCHING, PhaseStatus.SUCCESS, "Repository updated")
        return

    ensure_directory(layout.repo_dir)
    _emit(reporter, Phase.CLONING, PhaseStatus.START, f"Cloning bare repository to {bare_path}...")
    try:
        git.clone(url, bare_path, bare=True, progress=reporter.progress)
    except GitOperationError as exc:
        # Partial clone output is left on disk for the user to inspect or resume.
        _emit(reporter, Phase.CLONING, PhaseStatus.FAILURE, f"Clone failed: {exc}")
        raise
    _emit(reporter, Phase.CLONING, PhaseStatus.SUCCESS, "Repository cloned successfully")


def create_worktree(
    branch: str,
    worktree_path: Path,
    bare_path: Path,
    git: GitClient,
    reporter: Reporter,
) -> BranchResult:
    """Add a worktree for ``branch``; create the branch if git does not know it."""

    _emit(reporter, Phase.CREATING_WORKTREE, PhaseStatus.START, f"Creating worktree for branch {branch}...")
    if worktree_path.exists():
        error = PathConflictError(worktree_path)
        _emit(reporter, Phase.CREATING_WORKTREE, PhaseStatus.FAILURE, str(error))
        return BranchResult(branch=branch, worktree_path=worktree_path, error=str(error))

    bare_git = git.at(bare_path)
    try:
        bare_git.raw(["worktree", "add", str(worktree_path), branch])
    except GitOperationError as exc:
        if not is_branch_not_found(exc):
            _emit(reporter, Phase.CREATING_WORKTREE, PhaseStatus.FAILURE, f"{branch}: {exc}")
            return BranchResult(branch=branch, worktree_path=worktree_path, error=str(exc))
        logger.debug("Branch %s not found, retrying with -b", branch)
    else:
        _emit(reporter, Phase.CREATING_WORKTREE, PhaseStatus.SUCCESS, f"Worktree created for {branch}")
        return BranchResult(branch=branch, worktree_path=worktree_path)

    _emit(
        reporter,
        Phase.CREATING_BRANCH,
        PhaseStatus.START,
        f"Branch {branch} not found. Creating new branch...",
    )
    try:
        bare_git.raw(["worktree", "add", "-b", branch, str(worktree_path)])
    except GitOperationError as exc:
        _emit(reporter, Phase.CREATING_BRANCH, PhaseStatus.FAILURE, f"{branch}: {exc}")
        return BranchResult(branch=branch, worktree_path=worktree_path, error=str(exc))
    _emit(reporter, Phase.CREATING_BRANCH, PhaseStatus.SUCCESS, f"New branch worktree created for {branch}")
    return BranchResult(branch=branch, worktree_path=worktree_path, created_branch=True)


def create_worktrees(layout: WorkspaceLayout, git: GitClient, reporter: Reporter) -> list[BranchResult]:
    # One branch at a time against the shared bare repository.
    return [
        create_worktree(branch, path, layout.bare_repo_path, git, reporter)
        for branch, path in layout.worktree_paths.items()
    ]


def provision_workspace(inputs: WorkspaceInputs, git: GitClient, reporter: Reporter) -> ProvisionReport:
    layout = plan_layout(inputs.url, inputs.base_dir, inputs.branches)
    logger.debug("Planned layout for %s: %s", inputs.url, layout)
    ensure_bare_repository(inputs.url, layout, git, reporter)
    results = create_worktrees(layout, git, reporter)
    report = ProvisionReport(layout=layout, results=tuple(results))
    reporter.summary(report)
    return report


def _emit(reporter: Reporter, phase: Phase, status: PhaseStatus, detail: str) -> None:
    reporter.phase(PhaseEvent(phase=phase, status=status, detail=detail))


__all__ = [
    "BRANCH_NOT_FOUND_MARKERS",
    "GitClient",
    "is_branch_not_found",
    "ensure_bare_repository",
    "create_worktree",
    "create_worktrees",
    "provision_workspace",
]
