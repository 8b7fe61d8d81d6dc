"""Tests for deriving the workspace layout from a repository URL."""

from __future__ import annotations

import os
import unittest
from pathlib import Path

from git_easy_wt.exceptions import ValidationError
from git_easy_wt.layout import BARE_DIR_NAME, plan_layout, repo_name_from_url


class RepoNameTests(unittest.TestCase):
    def test_strips_optional_git_suffix(self) -> None:
        for url in (
            "https://github.com/octocat/Hello-World.git",
            "https://github.com/octocat/Hello-World",
            "git@github.com:octocat/Hello-World.git",
            "ssh://git@host:2222/octocat/Hello-World",
            "/srv/git/Hello-World.git",
        ):
            with self.subTest(url=url):
                self.assertEqual(repo_name_from_url(url), "Hello-World")

    def test_only_the_last_git_suffix_is_removed(self) -> None:
        self.assertEqual(repo_name_from_url("https://host/org/tools.git.git"), "tools.git")

    def test_url_without_slash_is_invalid(self) -> None:
        for url in ("Hello-World.git", "not a url", ""):
            with self.subTest(url=url):
                with self.assertRaisesRegex(ValidationError, "Invalid Git URL"):
                    repo_name_from_url(url)

    def test_trailing_slash_is_invalid(self) -> None:
        with self.assertRaises(ValidationError):
            repo_name_from_url("https://host/org/repo/")


class PlanLayoutTests(unittest.TestCase):
    def setUp(self) -> None:
        self.base = Path("/work/space")

    def test_paths_are_joined_under_repo_dir(self) -> None:
        layout = plan_layout("https://host/org/Hello-World.git", self.base, ["main", "feature-x"])

        self.assertEqual(layout.repo_name, "Hello-World")
        self.assertEqual(layout.repo_dir, self.base / "Hello-World")
        self.assertEqual(layout.bare_repo_path, self.base / "Hello-World" / BARE_DIR_NAME)
        self.assertEqual(
            layout.worktree_path("feature-x"),
            Path(os.path.join(self.base, "Hello-World", "feature-x")),
        )

    def test_worktree_order_follows_branch_order(self) -> None:
        layout = plan_layout("https://host/org/repo.git", self.base, ["dev", "test"])
        self.assertEqual(list(layout.worktree_paths), ["dev", "test"])

    def test_layout_is_deterministic_and_side_effect_free(self) -> None:
        first = plan_layout("https://host/org/repo", self.base, ["main"])
        second = plan_layout("https://host/org/repo", self.base, ["main"])

        self.assertEqual(first, second)
        self.assertFalse(first.repo_dir.exists())


if __name__ == "__main__":
    unittest.main()
