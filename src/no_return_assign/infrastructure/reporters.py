"""Reporter implementations for lint results."""

import json
from typing import TYPE_CHECKING

from no_return_assign.domain.protocols import LintReporterProtocol
from no_return_assign.domain.rules.no_return_assign import NoReturnAssignRule

if TYPE_CHECKING:
    from no_return_assign.domain.entities import LintResult
    from no_return_assign.domain.protocols import TelemetryPort


class TerminalLintReporter(LintReporterProtocol):
    """Terminal reporter using stellar_ui_kit for the violations table."""

    def __init__(self, telemetry: "TelemetryPort") -> None:
        from stellar_ui_kit import TerminalReporter
        self.reporter = TerminalReporter()
        self._telemetry = telemetry

    def report(self, result: "LintResult") -> None:
        """Print one row per violation, then a summary line."""
        if not result.has_violations():
            self._telemetry.step(
                f"\n✅ No assignments in return values across {result.files_checked} file(s).")
            return

        from stellar_ui_kit import ColumnDefinition, ReportSchema

        entry = NoReturnAssignRule.REGISTRY_ENTRY
        schema = ReportSchema(
            title=f"[{entry['symbol']}] {entry['short_description']}",
            columns=[
                ColumnDefinition(header="Location", key="location", style="#00EEFF"),
                ColumnDefinition(header="Rule ID", key="code", style="#C41E3A"),
                ColumnDefinition(header="Message", key="message"),
            ],
            header_style="bold #F9A602",
        )
        rows = [
            {"location": v.location, "code": v.code, "message": v.message}
            for v in result.violations
        ]
        self.reporter.generate_report(rows, schema)
        self._telemetry.step(
            f"{len(result.violations)} violation(s) in {result.files_checked} file(s).")


class JsonLintReporter(LintReporterProtocol):
    """Machine-readable output on stdout."""

    def report(self, result: "LintResult") -> None:
        payload: dict[str, object] = {"rule": dict(NoReturnAssignRule.REGISTRY_ENTRY)}
        payload.update(result.to_dict())
        print(json.dumps(payload, indent=2))
