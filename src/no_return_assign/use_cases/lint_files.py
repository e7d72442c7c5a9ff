"""Use case: lint a batch of ESTree files with the no-return-assign check."""

from collections.abc import Sequence

from no_return_assign.domain.config import ConfigurationLoader, Mode
from no_return_assign.domain.entities import LintResult
from no_return_assign.domain.exceptions import TreeLoadError
from no_return_assign.domain.protocols import (
    FileSystemProtocol,
    TelemetryPort,
    TreeGatewayProtocol,
)
from no_return_assign.domain.rules import Violation
from no_return_assign.domain.rules.no_return_assign import NoReturnAssignRule
from no_return_assign.use_cases.checks.returns import ReturnAssignChecker
from no_return_assign.use_cases.walker import TreeWalker


class LintFilesUseCase:
    """
    Expand input paths, load each tree, walk it, aggregate violations.

    A file that fails to load is reported through telemetry and recorded in
    ``failed_files``; the remaining files are still checked.
    """

    def __init__(
        self,
        tree_gateway: TreeGatewayProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: ConfigurationLoader,
    ) -> None:
        self.tree_gateway = tree_gateway
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader

    def collect_files(self, paths: Sequence[str]) -> list[str]:
        """Expand directories, drop excluded paths, keep first-seen order without duplicates."""
        seen: dict[str, None] = {}
        for path in paths:
            for file_path in self.filesystem.glob_tree_files(path):
                if self.config_loader.is_excluded(file_path):
                    self.telemetry.debug(f"Skipping excluded path {file_path}")
                    continue
                seen.setdefault(file_path, None)
        return list(seen)

    def execute(self, paths: Sequence[str]) -> LintResult:
        rule = NoReturnAssignRule(self.config_loader.mode)
        checker = ReturnAssignChecker(rule)
        walker = TreeWalker()
        walker.add_checker(checker)

        files = self.collect_files(paths)
        self.telemetry.step(
            f"Checking {len(files)} file(s) with no-return-assign (mode: {rule.mode.value})")

        violations: list[Violation] = []
        failed: list[str] = []
        checked = 0
        for file_path in files:
            try:
                tree = self.tree_gateway.load_file(file_path)
            except TreeLoadError as e:
                self.telemetry.error(str(e))
                failed.append(file_path)
                continue
            if rule.mode is Mode.EXCEPT_PARENS and len(tree.tokens) == 0:
                self.telemetry.warning(
                    f"{file_path}: no tokens in tree; parenthesized assignments will be reported")
            walker.walk(tree)
            found = checker.violations
            self.telemetry.debug(f"{file_path}: {len(found)} violation(s)")
            violations.extend(found)
            checked += 1

        return LintResult(violations=violations, files_checked=checked, failed_files=failed)
