"""Tree walker - host traversal engine that drives checkers over a SyntaxTree. No I/O."""

from collections import defaultdict
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from no_return_assign.domain.entities import SyntaxTree
    from no_return_assign.domain.nodes import SyntaxNode

Visitor = Callable[["SyntaxNode"], None]


class TreeWalker:
    """
    Pre-order, document-order walker with pylint-style dispatch.

    A checker opts into a node type by defining ``visit_<type lowercased>``,
    e.g. ``visit_assignmentexpression``. Checkers may also define
    ``open(tree)`` and ``close()``, called around each tree.
    """

    def __init__(self) -> None:
        self._checkers: list[object] = []
        self._visitors: dict[str, list[Visitor]] = defaultdict(list)

    def add_checker(self, checker: object) -> None:
        self._checkers.append(checker)
        for name in dir(checker):
            if name.startswith("visit_"):
                self._visitors[name[len("visit_"):]].append(getattr(checker, name))

    def walk(self, tree: "SyntaxTree") -> None:
        for checker in self._checkers:
            opener = getattr(checker, "open", None)
            if callable(opener):
                opener(tree)
        # Explicit stack: generated trees can be deeper than the recursion limit
        stack: list["SyntaxNode"] = [tree.root]
        while stack:
            node = stack.pop()
            for visit in self._visitors.get(node.type.lower(), ()):
                visit(node)
            stack.extend(reversed(node.children()))
        for checker in self._checkers:
            closer = getattr(checker, "close", None)
            if callable(closer):
                closer()
