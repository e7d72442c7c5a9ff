"""no-return-assign: assignment used as a return value or as a concise arrow body."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Sequence

from no_return_assign.domain.config import Mode
from no_return_assign.domain.constants import (
    ARROW_ASSIGN_MESSAGE,
    MODE_CHOICES,
    RETURN_ASSIGN_MESSAGE,
    RULE_SYMBOL,
)
from no_return_assign.domain.nodes import NodeKind, SyntaxNode
from no_return_assign.domain.protocols import TokenAccessor
from no_return_assign.domain.registry_types import RuleRegistryEntry
from no_return_assign.domain.rules import Checkable, Violation


class Outcome(Enum):
    NO_VIOLATION = "no-violation"
    RETURN_VIOLATION = "return-violation"
    ARROW_VIOLATION = "arrow-violation"


@dataclass(frozen=True)
class Classification:
    """Where an assignment's value ends up, and which node a report attaches to."""

    outcome: Outcome
    report_node: Optional[SyntaxNode] = None

    @property
    def is_violation(self) -> bool:
        return self.outcome is not Outcome.NO_VIOLATION


NO_VIOLATION = Classification(Outcome.NO_VIOLATION)


class NoReturnAssignRule(Checkable):
    """
    Flags assignments whose value is returned.

    An assignment is walked upward through transparent wrappers (conditional,
    logical, sequence and parenthesized expressions, calls, members...) until
    a boundary kind is hit: any statement, or a function/class expression.
    A ReturnStatement boundary, or an arrow function whose concise body is the
    wrapped assignment, is a violation. Any other boundary means the value is
    consumed in an unrelated evaluation context.
    """

    code: str = RULE_SYMBOL
    description: str = "disallow assignment operators in `return` statements"

    MESSAGES: ClassVar[dict[Outcome, str]] = {
        Outcome.RETURN_VIOLATION: RETURN_ASSIGN_MESSAGE,
        Outcome.ARROW_VIOLATION: ARROW_ASSIGN_MESSAGE,
    }

    REGISTRY_ENTRY: ClassVar[RuleRegistryEntry] = {
        "symbol": RULE_SYMBOL,
        "display_name": "No Return Assign",
        "short_description": "disallow assignment operators in `return` statements",
        "category": "Best Practices",
        "recommended": False,
        "fixable": False,
        "options": list(MODE_CHOICES),
        "messages": {
            "return": RETURN_ASSIGN_MESSAGE,
            "arrow": ARROW_ASSIGN_MESSAGE,
        },
    }

    def __init__(self, mode: Mode = Mode.EXCEPT_PARENS) -> None:
        self._mode = mode

    @classmethod
    def from_options(cls, options: Optional[Sequence[object]] = None) -> "NoReturnAssignRule":
        """Build the rule from positional options, e.g. ``["always"]``."""
        return cls(Mode.from_options(options))

    @property
    def mode(self) -> Mode:
        return self._mode

    def check(self, node: SyntaxNode, tokens: TokenAccessor) -> list[Violation]:
        """Check one AssignmentExpression. Returns at most one violation."""
        if node.kind is not NodeKind.ASSIGNMENT_EXPRESSION:
            return []
        if self._mode is Mode.EXCEPT_PARENS and self.is_parenthesized(node, tokens):
            return []
        result = self.classify(node)
        if not result.is_violation or result.report_node is None:
            return []
        return [
            Violation.from_node(
                code=self.code,
                message=self.MESSAGES[result.outcome],
                node=result.report_node,
            )
        ]

    @staticmethod
    def classify(assignment: SyntaxNode) -> Classification:
        """Classify how the value of ``assignment`` is consumed."""
        boundary = next(
            ((child, parent) for child, parent in _ancestor_pairs(assignment)
             if parent.kind.is_boundary),
            None,
        )
        if boundary is None:
            return NO_VIOLATION
        child, parent = boundary
        if parent.kind is NodeKind.RETURN_STATEMENT:
            return Classification(Outcome.RETURN_VIOLATION, parent)
        if (
            parent.kind is NodeKind.ARROW_FUNCTION_EXPRESSION
            and parent.get("body") is child
        ):
            return Classification(Outcome.ARROW_VIOLATION, parent)
        return NO_VIOLATION

    @staticmethod
    def is_parenthesized(node: SyntaxNode, tokens: TokenAccessor) -> bool:
        """True if a single pair of parens directly wraps ``node``."""
        before = tokens.token_before(node)
        after = tokens.token_after(node)
        if before is None or after is None:
            return False
        return before.value == "(" and after.value == ")"


def _ancestor_pairs(node: SyntaxNode) -> Iterator[tuple[SyntaxNode, SyntaxNode]]:
    """Yield (child, parent) for each step from ``node`` up to the root."""
    child = node
    for parent in node.ancestors():
        yield child, parent
        child = parent
