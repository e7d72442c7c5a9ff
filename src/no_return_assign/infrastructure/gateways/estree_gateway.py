"""ESTree Gateway - builds SyntaxTree objects from parser JSON output. Infrastructure I/O only."""

import json
import logging
from pathlib import Path
from typing import Optional

from no_return_assign.domain.entities import SyntaxTree
from no_return_assign.domain.exceptions import TreeLoadError
from no_return_assign.domain.nodes import SyntaxNode, Token
from no_return_assign.domain.protocols import TreeGatewayProtocol
from no_return_assign.infrastructure.gateways.token_store import TokenStore

logger = logging.getLogger(__name__)

# Position and bookkeeping keys never become node fields
_RESERVED_KEYS: frozenset[str] = frozenset(
    {"type", "range", "loc", "start", "end", "parent", "tokens", "comments"}
)


class EstreeGateway(TreeGatewayProtocol):
    """
    Loads ESTree JSON as produced by espree, acorn or esprima.

    Accepted documents are a ``Program`` node (optionally carrying ``tokens``)
    or a wrapper ``{"ast": Program, "tokens": [...]}``. Offsets come from
    ``range`` or from ``start``/``end``. Parent links are set exactly once,
    while building.
    """

    def load_file(self, path: str) -> SyntaxTree:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise TreeLoadError(path, f"cannot read file ({e.strerror or e})") from e
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise TreeLoadError(path, f"invalid JSON at line {e.lineno}: {e.msg}") from e
        return self.build_tree(document, path=path)

    def build_tree(self, document: object, path: Optional[str] = None) -> SyntaxTree:
        """Build a tree from an already-decoded JSON document."""
        label = path or "<memory>"
        if not isinstance(document, dict):
            raise TreeLoadError(label, "top level is not a JSON object")
        raw_root = document.get("ast", document)
        raw_tokens = document.get("tokens")
        if raw_tokens is None and isinstance(raw_root, dict):
            raw_tokens = raw_root.get("tokens")
        if not self._is_node(raw_root):
            raise TreeLoadError(label, "document has no ESTree root node")

        root = self.build_node(raw_root)
        root.file = path
        tokens = TokenStore(self._build_tokens(raw_tokens or [], label))
        logger.debug("Loaded %s: root=%s tokens=%d", label, root.type, len(tokens))
        return SyntaxTree(root=root, tokens=tokens, path=path)

    def build_node(self, raw: dict[str, object]) -> SyntaxNode:
        """Convert one ESTree dict (recursively) into a SyntaxNode and link its children."""
        fields: dict[str, object] = {}
        children: list[SyntaxNode] = []
        for key, value in raw.items():
            if key in _RESERVED_KEYS:
                continue
            if self._is_node(value):
                child = self.build_node(value)  # type: ignore[arg-type]
                children.append(child)
                fields[key] = child
            elif isinstance(value, list):
                items: list[object] = []
                for item in value:
                    if self._is_node(item):
                        child = self.build_node(item)  # type: ignore[arg-type]
                        children.append(child)
                        items.append(child)
                    else:
                        items.append(item)
                fields[key] = items
            else:
                fields[key] = value

        node = SyntaxNode(
            str(raw["type"]),
            fields,
            range=self._read_range(raw),
            loc=self._read_loc(raw),
        )
        for child in children:
            child.attach_to(node)
        return node

    @staticmethod
    def _is_node(value: object) -> bool:
        return isinstance(value, dict) and isinstance(value.get("type"), str)

    @staticmethod
    def _read_range(raw: dict[str, object]) -> Optional[tuple[int, int]]:
        rng = raw.get("range")
        if isinstance(rng, list) and len(rng) == 2 and all(isinstance(x, int) for x in rng):
            return (rng[0], rng[1])
        start, end = raw.get("start"), raw.get("end")
        if isinstance(start, int) and isinstance(end, int):
            return (start, end)
        return None

    @staticmethod
    def _read_loc(raw: dict[str, object]) -> Optional[tuple[int, int]]:
        loc = raw.get("loc")
        if not isinstance(loc, dict):
            return None
        start = loc.get("start")
        if isinstance(start, dict) and isinstance(start.get("line"), int):
            return (start["line"], int(start.get("column", 0)))
        return None

    def _build_tokens(self, raw_tokens: object, label: str) -> list[Token]:
        if not isinstance(raw_tokens, list):
            raise TreeLoadError(label, "'tokens' is not a list")
        tokens: list[Token] = []
        for raw in raw_tokens:
            if not isinstance(raw, dict):
                raise TreeLoadError(label, f"malformed token {raw!r}")
            rng = self._read_range(raw)
            if rng is None:
                raise TreeLoadError(label, f"token without position {raw!r}")
            token_type = raw.get("type", "")
            # acorn: type is a TokenType object; punctuators carry no value
            if isinstance(token_type, dict):
                token_type = token_type.get("label", "")
            value = raw.get("value")
            if value is None:
                value = token_type
            tokens.append(Token(type=str(token_type), value=str(value), range=rng))
        return tokens
