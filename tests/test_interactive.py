"""Tests for the InquirerPy line prompts."""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock, patch

from git_easy_wt.exceptions import CancelledError
from git_easy_wt.inputs import RawInputs
from git_easy_wt.interactive import LinePromptCollector, _not_blank


class LinePromptCollectorTests(unittest.TestCase):
    @patch("git_easy_wt.interactive.inquirer")
    def test_only_missing_fields_are_prompted(self, mock_inquirer: MagicMock) -> None:
        mock_inquirer.text.return_value.execute.return_value = "  dev, test "

        answers = LinePromptCollector().collect(RawInputs(url="https://host/org/repo", directory="/work"))

        self.assertEqual(answers, RawInputs(url="https://host/org/repo", branch="dev, test", directory="/work"))
        mock_inquirer.text.assert_called_once()
        self.assertEqual(mock_inquirer.text.call_args.kwargs["invalid_message"], "Branch name is required")

    @patch("git_easy_wt.interactive.inquirer")
    def test_both_fields_prompted_in_order(self, mock_inquirer: MagicMock) -> None:
        mock_inquirer.text.return_value.execute.side_effect = ["https://host/org/repo", "main"]

        answers = LinePromptCollector().collect(RawInputs(directory="/work"))

        self.assertEqual(answers.url, "https://host/org/repo")
        self.assertEqual(answers.branch, "main")
        messages = [call.kwargs["message"] for call in mock_inquirer.text.call_args_list]
        self.assertEqual(messages, ["Enter Git Repository URL:", "Enter Branch Name(s):"])

    @patch("git_easy_wt.interactive.inquirer")
    def test_ctrl_c_becomes_cancelled(self, mock_inquirer: MagicMock) -> None:
        mock_inquirer.text.return_value.execute.side_effect = KeyboardInterrupt

        with self.assertRaises(CancelledError):
            LinePromptCollector().collect(RawInputs())

    def test_validator_rejects_blank(self) -> None:
        self.assertFalse(_not_blank("   "))
        self.assertFalse(_not_blank(""))
        self.assertTrue(_not_blank(" main "))


if __name__ == "__main__":
    unittest.main()
