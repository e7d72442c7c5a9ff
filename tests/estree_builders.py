"""Shared helpers for building small ESTree documents in tests."""

from pathlib import Path
from typing import Any, Optional
from unittest.mock import MagicMock

from no_return_assign.domain.entities import SyntaxTree
from no_return_assign.domain.nodes import NodeKind, SyntaxNode, Token
from no_return_assign.infrastructure.gateways.estree_gateway import EstreeGateway

FIXTURES = Path(__file__).parent / "fixtures"

Raw = dict[str, Any]


def ident(name: str) -> Raw:
    return {"type": "Identifier", "name": name}


def lit(value: object) -> Raw:
    return {"type": "Literal", "value": value, "raw": repr(value)}


def assign(target: str, value: object = 1) -> Raw:
    return {"type": "AssignmentExpression", "operator": "=", "left": ident(target), "right": lit(value)}


def ret(argument: Optional[Raw]) -> Raw:
    return {"type": "ReturnStatement", "argument": argument}


def expr_stmt(expression: Raw) -> Raw:
    return {"type": "ExpressionStatement", "expression": expression}


def block(*body: Raw) -> Raw:
    return {"type": "BlockStatement", "body": list(body)}


def fn_decl(name: str, *body: Raw) -> Raw:
    return {"type": "FunctionDeclaration", "id": ident(name), "params": [], "body": block(*body)}


def fn_expr(*body: Raw) -> Raw:
    return {"type": "FunctionExpression", "id": None, "params": [], "body": block(*body)}


def arrow(body: Raw) -> Raw:
    """Concise arrow when ``body`` is an expression, block-bodied when it is a BlockStatement."""
    return {
        "type": "ArrowFunctionExpression",
        "params": [],
        "expression": body["type"] != "BlockStatement",
        "body": body,
    }


def call(callee: Raw, *args: Raw) -> Raw:
    return {"type": "CallExpression", "callee": callee, "arguments": list(args)}


def var(name: str, init: Raw) -> Raw:
    return {
        "type": "VariableDeclaration",
        "kind": "var",
        "declarations": [{"type": "VariableDeclarator", "id": ident(name), "init": init}],
    }


def program(*body: Raw) -> Raw:
    return {"type": "Program", "sourceType": "script", "body": list(body)}


def build(document: Raw) -> SyntaxTree:
    return EstreeGateway().build_tree(document, path="test.js")


def assignments(tree: SyntaxTree) -> list[SyntaxNode]:
    return list(tree.root.nodes_of_kind(NodeKind.ASSIGNMENT_EXPRESSION))


def token_accessor(before: Optional[str] = None, after: Optional[str] = None) -> MagicMock:
    """Token accessor mock answering every lookup with the given punctuators (None = no token)."""
    accessor = MagicMock()
    accessor.token_before.return_value = (
        Token("Punctuator", before, (0, len(before))) if before is not None else None)
    accessor.token_after.return_value = (
        Token("Punctuator", after, (0, len(after))) if after is not None else None)
    return accessor
