"""Unit tests for LintFilesUseCase and ReturnAssignChecker."""

import unittest
from unittest.mock import MagicMock

from no_return_assign.domain.config import ConfigurationLoader
from no_return_assign.domain.exceptions import TreeLoadError
from no_return_assign.domain.rules.no_return_assign import NoReturnAssignRule
from no_return_assign.infrastructure.gateways.estree_gateway import EstreeGateway
from no_return_assign.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from no_return_assign.use_cases.checks.returns import ReturnAssignChecker
from no_return_assign.use_cases.lint_files import LintFilesUseCase
from tests.estree_builders import (
    FIXTURES,
    arrow,
    assign,
    assignments,
    build,
    call,
    fn_decl,
    fn_expr,
    program,
    ret,
    var,
)


class TestReturnAssignChecker(unittest.TestCase):
    def test_visit_before_open_raises(self) -> None:
        checker = ReturnAssignChecker(NoReturnAssignRule())
        tree = build(program(fn_decl("f", ret(assign("x")))))
        with self.assertRaises(RuntimeError):
            checker.visit_assignmentexpression(assignments(tree)[0])

    def test_open_resets_collected_violations(self) -> None:
        checker = ReturnAssignChecker(NoReturnAssignRule())
        tree = build(program(fn_decl("f", ret(assign("x")))))
        checker.open(tree)
        checker.visit_assignmentexpression(assignments(tree)[0])
        self.assertEqual(len(checker.violations), 1)

        checker.open(build(program()))
        self.assertEqual(checker.violations, [])

    def test_delegates_with_tree_tokens(self) -> None:
        rule = MagicMock()
        rule.check.return_value = []
        checker = ReturnAssignChecker(rule)
        tree = build(program(fn_decl("f", ret(assign("x")))))
        node = assignments(tree)[0]

        checker.open(tree)
        checker.visit_assignmentexpression(node)

        rule.check.assert_called_once_with(node, tree.tokens)


class TestLintFilesUseCase(unittest.TestCase):
    def _use_case(self, config: dict[str, object] | None = None, gateway: object = None) -> LintFilesUseCase:
        self.telemetry = MagicMock()
        return LintFilesUseCase(
            tree_gateway=gateway or EstreeGateway(),
            filesystem=FileSystemGateway(),
            telemetry=self.telemetry,
            config_loader=ConfigurationLoader(config or {}),
        )

    def test_fixture_directory_default_mode(self) -> None:
        """return x = 1 and () => x = 1 are reported; return (x = 1) is not."""
        result = self._use_case().execute([str(FIXTURES)])

        self.assertEqual(result.files_checked, 4)
        self.assertEqual(result.failed_files, [])
        self.assertEqual(
            sorted((v.location.rsplit("/", 1)[-1], v.message) for v in result.violations),
            [
                ("arrow_assign.json:1:8", "Arrow function should not return assignment."),
                ("return_assign.json:1:14", "Return statement should not contain assignment."),
            ],
        )
        self.assertEqual(result.exit_code(), 1)

    def test_always_mode_reports_parenthesized_return(self) -> None:
        result = self._use_case({"mode": "always"}).execute(
            [str(FIXTURES / "return_parenthesized_assign.json")])

        self.assertEqual(len(result.violations), 1)
        self.assertEqual(result.violations[0].node.type, "ReturnStatement")

    def test_except_parens_mode_allows_parenthesized_return(self) -> None:
        result = self._use_case().execute([str(FIXTURES / "return_parenthesized_assign.json")])

        self.assertEqual(result.violations, [])
        self.assertEqual(result.exit_code(), 0)

    def test_excluded_paths_are_skipped(self) -> None:
        result = self._use_case({"exclude_paths": ["arrow_"]}).execute([str(FIXTURES)])

        self.assertEqual(result.files_checked, 3)
        self.assertTrue(all("arrow_assign" not in v.location for v in result.violations))

    def test_duplicate_inputs_are_checked_once(self) -> None:
        target = str(FIXTURES / "return_assign.json")
        result = self._use_case().execute([target, target])

        self.assertEqual(result.files_checked, 1)
        self.assertEqual(len(result.violations), 1)

    def test_load_failure_is_recorded_and_run_continues(self) -> None:
        gateway = MagicMock()
        good = EstreeGateway().load_file(str(FIXTURES / "return_assign.json"))
        gateway.load_file.side_effect = [TreeLoadError("bad.json", "invalid JSON"), good]
        use_case = self._use_case(gateway=gateway)

        result = use_case.execute(["bad.json", str(FIXTURES / "return_assign.json")])

        self.assertEqual(result.failed_files, ["bad.json"])
        self.assertEqual(result.files_checked, 1)
        self.assertEqual(len(result.violations), 1)
        self.assertEqual(result.exit_code(), 2)
        self.telemetry.error.assert_called_once_with("bad.json: invalid JSON")

    def test_nested_function_scenario_in_memory(self) -> None:
        """function f(){ return function(){ return x = 1; }(); } yields one violation, inner return."""
        tree = build(program(
            fn_decl("f", ret(call(fn_expr(ret(assign("x")))))),
            var("g", arrow(assign("y"))),
        ))
        gateway = MagicMock()
        gateway.load_file.return_value = tree

        result = self._use_case(gateway=gateway).execute(["mem.json"])

        self.assertEqual(
            [v.node.type for v in result.violations],
            ["ReturnStatement", "ArrowFunctionExpression"],
        )
        inner_return = assignments(tree)[0].parent
        self.assertIs(result.violations[0].node, inner_return)

    def test_acorn_tokens_allow_parenthesized_return(self) -> None:
        """acorn output for function f(){ return (x = 1); } is clean by default, reported in always mode."""
        target = str(FIXTURES / "return_parenthesized_assign_acorn.json")

        self.assertEqual(self._use_case().execute([target]).violations, [])
        always = self._use_case({"mode": "always"}).execute([target])
        self.assertEqual([v.location.rsplit("/", 1)[-1] for v in always.violations],
                         ["return_parenthesized_assign_acorn.json:1:14"])

    def test_tree_without_tokens_warns_in_except_parens_mode(self) -> None:
        gateway = MagicMock()
        gateway.load_file.return_value = build(program(fn_decl("f", ret(assign("x")))))
        use_case = self._use_case(gateway=gateway)

        use_case.execute(["mem.json"])

        self.telemetry.warning.assert_called_once()
        self.assertIn("mem.json", self.telemetry.warning.call_args[0][0])

    def test_tree_without_tokens_does_not_warn_in_always_mode(self) -> None:
        gateway = MagicMock()
        gateway.load_file.return_value = build(program(fn_decl("f", ret(assign("x")))))
        use_case = self._use_case({"mode": "always"}, gateway=gateway)

        use_case.execute(["mem.json"])

        self.telemetry.warning.assert_not_called()

    def test_tree_with_tokens_does_not_warn(self) -> None:
        self._use_case().execute([str(FIXTURES / "return_assign.json")])

        self.telemetry.warning.assert_not_called()
