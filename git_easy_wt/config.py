"""Environment-driven settings."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping

from .exceptions import ValidationError


class UiMode(str, Enum):
    PROMPT = "prompt"
    FORM = "form"


@dataclass(frozen=True, slots=True)
class Settings:
    default_dir: Path
    ui: UiMode
    git_executable: str


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    raw_dir = env.get("GIT_WT_DIR", "").strip()
    default_dir = Path(raw_dir).expanduser() if raw_dir else Path.cwd()
    return Settings(
        default_dir=default_dir,
        ui=parse_ui_mode(env.get("GIT_WT_UI", "")),
        git_executable=env.get("GIT_WT_GIT", "").strip() or "git",
    )


def parse_ui_mode(raw: str | None) -> UiMode:
    value = (raw or "").strip().lower()
    if not value:
        return UiMode.PROMPT
    try:
        return UiMode(value)
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in UiMode)
        raise ValidationError(f"Unsupported UI mode {raw!r}. Choose one of: {choices}.") from exc


def is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


__all__ = ["UiMode", "Settings", "load_settings", "parse_ui_mode", "is_interactive"]
