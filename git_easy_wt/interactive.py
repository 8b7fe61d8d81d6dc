"""Line-based prompts built on InquirerPy."""

from __future__ import annotations

from InquirerPy import inquirer

from .exceptions import CancelledError
from .inputs import RawInputs


def _not_blank(value: str) -> bool:
    return bool(value and value.strip())


def prompt_text(message: str, *, invalid_message: str, default: str = "") -> str:
    try:
        answer = inquirer.text(
            message=message,
            default=default,
            validate=_not_blank,
            invalid_message=invalid_message,
        ).execute()
    except KeyboardInterrupt as exc:
        raise CancelledError() from exc
    if answer is None:
        # skipped via the skip keybinding
        raise CancelledError()
    return answer.strip()


class LinePromptCollector:
    """Asks one question per missing field."""

    def collect(self, known: RawInputs) -> RawInputs:
        url = known.url or prompt_text("Enter Git Repository URL:", invalid_message="URL is required")
        branch = known.branch or prompt_text(
            "Enter Branch Name(s):",
            invalid_message="Branch name is required",
        )
        return RawInputs(url=url, branch=branch, directory=known.directory)


__all__ = ["prompt_text", "LinePromptCollector"]
