"""Token Store - Infrastructure implementation of TokenAccessor over an ESTree token array."""

from bisect import bisect_left, bisect_right
from collections.abc import Iterable
from typing import Optional

from no_return_assign.domain.nodes import SyntaxNode, Token
from no_return_assign.domain.protocols import TokenAccessor


class TokenStore(TokenAccessor):
    """Position-indexed token lookups. Tokens are kept sorted by start offset."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: list[Token] = sorted(tokens, key=lambda t: t.start)
        self._starts: list[int] = [t.start for t in self._tokens]
        self._ends: list[int] = [t.end for t in self._tokens]

    def __len__(self) -> int:
        return len(self._tokens)

    def token_before(self, node: SyntaxNode) -> Optional[Token]:
        """Last token ending at or before the node's first character."""
        if node.range is None:
            return None
        index = bisect_right(self._ends, node.range[0]) - 1
        return self._tokens[index] if index >= 0 else None

    def token_after(self, node: SyntaxNode) -> Optional[Token]:
        """First token starting at or after the node's last character."""
        if node.range is None:
            return None
        index = bisect_left(self._starts, node.range[1])
        return self._tokens[index] if index < len(self._tokens) else None
