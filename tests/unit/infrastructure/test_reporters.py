"""Unit tests for lint reporters."""

import json
import unittest
from unittest.mock import MagicMock, patch

import pytest

from no_return_assign.domain.entities import LintResult
from no_return_assign.domain.nodes import SyntaxNode
from no_return_assign.domain.rules import Violation
from no_return_assign.infrastructure.reporters import JsonLintReporter, TerminalLintReporter


def _violation(location: str = "a.json:1:14") -> Violation:
    return Violation(
        code="no-return-assign",
        message="Return statement should not contain assignment.",
        location=location,
        node=SyntaxNode("ReturnStatement"),
    )


class TestTerminalLintReporter(unittest.TestCase):
    @patch("stellar_ui_kit.ColumnDefinition")
    @patch("stellar_ui_kit.ReportSchema")
    @patch("stellar_ui_kit.TerminalReporter")
    def test_report_renders_one_row_per_violation(
        self, mock_reporter_cls: MagicMock, mock_schema: MagicMock, mock_column: MagicMock
    ) -> None:
        telemetry = MagicMock()
        reporter = TerminalLintReporter(telemetry)
        result = LintResult(violations=[_violation(), _violation("b.json:2:0")], files_checked=2)

        reporter.report(result)

        rows, _ = mock_reporter_cls.return_value.generate_report.call_args[0]
        self.assertEqual([r["location"] for r in rows], ["a.json:1:14", "b.json:2:0"])
        self.assertTrue(all(r["code"] == "no-return-assign" for r in rows))
        self.assertIn("no-return-assign", mock_schema.call_args.kwargs["title"])
        self.assertEqual(mock_column.call_count, 3)
        telemetry.step.assert_called_once_with("2 violation(s) in 2 file(s).")

    @patch("stellar_ui_kit.TerminalReporter")
    def test_clean_result_prints_success_line(self, mock_reporter_cls: MagicMock) -> None:
        telemetry = MagicMock()
        reporter = TerminalLintReporter(telemetry)

        reporter.report(LintResult(files_checked=4))

        mock_reporter_cls.return_value.generate_report.assert_not_called()
        self.assertIn("4 file(s)", telemetry.step.call_args[0][0])


def test_json_reporter_prints_payload(capsys: pytest.CaptureFixture[str]) -> None:
    result = LintResult(violations=[_violation()], files_checked=1, failed_files=["bad.json"])

    JsonLintReporter().report(result)

    payload = json.loads(capsys.readouterr().out)
    assert payload["rule"]["symbol"] == "no-return-assign"
    assert payload["violations"] == [
        {
            "code": "no-return-assign",
            "message": "Return statement should not contain assignment.",
            "location": "a.json:1:14",
        }
    ]
    assert payload["files_checked"] == 1
    assert payload["failed_files"] == ["bad.json"]
