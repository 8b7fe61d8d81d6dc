"""`python -m git_easy_wt` and the `git-wt` console script."""

from __future__ import annotations

from .cli import app


def main() -> None:
    app(prog_name="git-wt")


if __name__ == "__main__":
    main()
