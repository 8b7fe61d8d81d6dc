"""Parse branch arguments into an ordered, de-duplicated list."""

from __future__ import annotations

import re
from typing import Iterable

from .exceptions import ValidationError

_SEPARATORS = re.compile(r"[,\s]+")


def split_branch_tokens(tokens: Iterable[str]) -> list[str]:
    """Split raw tokens on commas and whitespace, keeping first-seen order.

    ``["dev,test", "release dev"]`` and ``"dev, test release dev"`` both give
    ``["dev", "test", "release"]``.
    """

    if isinstance(tokens, str):
        tokens = [tokens]
    seen: set[str] = set()
    result: list[str] = []
    for token in tokens:
        for piece in _SEPARATORS.split(token or ""):
            name = piece.strip()
            if not name or name in seen:
                continue
            seen.add(name)
            result.append(name)
    return result


def parse_branches(tokens: Iterable[str]) -> list[str]:
    branches = split_branch_tokens(tokens)
    if not branches:
        raise ValidationError("At least one branch name is required.")
    return branches


__all__ = ["split_branch_tokens", "parse_branches"]
