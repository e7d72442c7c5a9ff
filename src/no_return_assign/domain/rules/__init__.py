"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Violation",
]

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from no_return_assign.domain.nodes import SyntaxNode
    from no_return_assign.domain.protocols import TokenAccessor


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message and location."""

    code: str
    message: str
    location: str
    node: "SyntaxNode"

    @staticmethod
    def _location_from_node(node: "SyntaxNode") -> str:
        """Compute path:line:column from a node, falling back to the start offset."""
        path = node.root().file or ""
        if node.loc is not None:
            return f"{path}:{node.line}:{node.column}"
        offset = node.range[0] if node.range is not None else 0
        return f"{path}:@{offset}"

    @classmethod
    def from_node(cls, *, code: str, message: str, node: "SyntaxNode") -> "Violation":
        """Build a Violation with location derived from node. Prefer over manual location=."""
        return cls(
            code=code,
            message=message,
            location=cls._location_from_node(node),
            node=node,
        )


class Checkable(Protocol):
    """One-and-done check: given a node and its token stream, return violations."""

    code: str
    description: str

    def check(self, node: "SyntaxNode", tokens: "TokenAccessor") -> list[Violation]:
        ...
