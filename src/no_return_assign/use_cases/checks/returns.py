"""Return-assignment check (no-return-assign)."""

from typing import TYPE_CHECKING, Optional

from no_return_assign.domain.rules import Violation
from no_return_assign.domain.rules.no_return_assign import NoReturnAssignRule

if TYPE_CHECKING:
    from no_return_assign.domain.entities import SyntaxTree
    from no_return_assign.domain.nodes import SyntaxNode


class ReturnAssignChecker:
    """no-return-assign. Thin: delegates to NoReturnAssignRule and collects violations."""

    name: str = "no-return-assign"

    def __init__(self, rule: NoReturnAssignRule) -> None:
        self._rule = rule
        self._tree: Optional["SyntaxTree"] = None
        self._violations: list[Violation] = []

    @property
    def violations(self) -> list[Violation]:
        return list(self._violations)

    def open(self, tree: "SyntaxTree") -> None:
        self._tree = tree
        self._violations = []

    def visit_assignmentexpression(self, node: "SyntaxNode") -> None:
        """Delegate to the domain rule with the current tree's token stream."""
        if self._tree is None:
            raise RuntimeError("ReturnAssignChecker visited a node before open()")
        self._violations.extend(self._rule.check(node, self._tree.tokens))

    def close(self) -> None:
        self._tree = None
