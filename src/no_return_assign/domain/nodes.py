"""Read-only ESTree syntax model: node kinds, nodes with weak parent links, tokens."""

import weakref
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class NodeKind(Enum):
    """Closed enumeration of the ESTree node types. Unknown types map to OTHER."""

    PROGRAM = "Program"

    # Statements
    EXPRESSION_STATEMENT = "ExpressionStatement"
    BLOCK_STATEMENT = "BlockStatement"
    EMPTY_STATEMENT = "EmptyStatement"
    DEBUGGER_STATEMENT = "DebuggerStatement"
    WITH_STATEMENT = "WithStatement"
    RETURN_STATEMENT = "ReturnStatement"
    LABELED_STATEMENT = "LabeledStatement"
    BREAK_STATEMENT = "BreakStatement"
    CONTINUE_STATEMENT = "ContinueStatement"
    IF_STATEMENT = "IfStatement"
    SWITCH_STATEMENT = "SwitchStatement"
    THROW_STATEMENT = "ThrowStatement"
    TRY_STATEMENT = "TryStatement"
    WHILE_STATEMENT = "WhileStatement"
    DO_WHILE_STATEMENT = "DoWhileStatement"
    FOR_STATEMENT = "ForStatement"
    FOR_IN_STATEMENT = "ForInStatement"
    FOR_OF_STATEMENT = "ForOfStatement"

    # Declarations and clauses
    FUNCTION_DECLARATION = "FunctionDeclaration"
    VARIABLE_DECLARATION = "VariableDeclaration"
    VARIABLE_DECLARATOR = "VariableDeclarator"
    CLASS_DECLARATION = "ClassDeclaration"
    CLASS_BODY = "ClassBody"
    STATIC_BLOCK = "StaticBlock"
    METHOD_DEFINITION = "MethodDefinition"
    PROPERTY_DEFINITION = "PropertyDefinition"
    SWITCH_CASE = "SwitchCase"
    CATCH_CLAUSE = "CatchClause"
    IMPORT_DECLARATION = "ImportDeclaration"
    IMPORT_SPECIFIER = "ImportSpecifier"
    IMPORT_DEFAULT_SPECIFIER = "ImportDefaultSpecifier"
    IMPORT_NAMESPACE_SPECIFIER = "ImportNamespaceSpecifier"
    EXPORT_NAMED_DECLARATION = "ExportNamedDeclaration"
    EXPORT_DEFAULT_DECLARATION = "ExportDefaultDeclaration"
    EXPORT_ALL_DECLARATION = "ExportAllDeclaration"
    EXPORT_SPECIFIER = "ExportSpecifier"

    # Expressions
    IDENTIFIER = "Identifier"
    PRIVATE_IDENTIFIER = "PrivateIdentifier"
    LITERAL = "Literal"
    THIS_EXPRESSION = "ThisExpression"
    SUPER = "Super"
    ARRAY_EXPRESSION = "ArrayExpression"
    OBJECT_EXPRESSION = "ObjectExpression"
    PROPERTY = "Property"
    FUNCTION_EXPRESSION = "FunctionExpression"
    ARROW_FUNCTION_EXPRESSION = "ArrowFunctionExpression"
    CLASS_EXPRESSION = "ClassExpression"
    UNARY_EXPRESSION = "UnaryExpression"
    UPDATE_EXPRESSION = "UpdateExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    ASSIGNMENT_EXPRESSION = "AssignmentExpression"
    LOGICAL_EXPRESSION = "LogicalExpression"
    MEMBER_EXPRESSION = "MemberExpression"
    CHAIN_EXPRESSION = "ChainExpression"
    CONDITIONAL_EXPRESSION = "ConditionalExpression"
    CALL_EXPRESSION = "CallExpression"
    NEW_EXPRESSION = "NewExpression"
    SEQUENCE_EXPRESSION = "SequenceExpression"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"
    YIELD_EXPRESSION = "YieldExpression"
    AWAIT_EXPRESSION = "AwaitExpression"
    IMPORT_EXPRESSION = "ImportExpression"
    META_PROPERTY = "MetaProperty"
    SPREAD_ELEMENT = "SpreadElement"
    TEMPLATE_LITERAL = "TemplateLiteral"
    TEMPLATE_ELEMENT = "TemplateElement"
    TAGGED_TEMPLATE_EXPRESSION = "TaggedTemplateExpression"

    # Patterns
    OBJECT_PATTERN = "ObjectPattern"
    ARRAY_PATTERN = "ArrayPattern"
    REST_ELEMENT = "RestElement"
    ASSIGNMENT_PATTERN = "AssignmentPattern"

    OTHER = "*"

    @classmethod
    def from_type(cls, type_name: str) -> "NodeKind":
        """Map a raw ESTree type string to its kind; OTHER for anything unknown."""
        try:
            return cls(type_name)
        except ValueError:
            return cls.OTHER

    @property
    def is_statement(self) -> bool:
        return self in STATEMENT_KINDS

    @property
    def is_boundary(self) -> bool:
        """True for kinds that end an upward walk from an expression."""
        return self in BOUNDARY_KINDS


STATEMENT_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.EXPRESSION_STATEMENT,
        NodeKind.BLOCK_STATEMENT,
        NodeKind.EMPTY_STATEMENT,
        NodeKind.DEBUGGER_STATEMENT,
        NodeKind.WITH_STATEMENT,
        NodeKind.RETURN_STATEMENT,
        NodeKind.LABELED_STATEMENT,
        NodeKind.BREAK_STATEMENT,
        NodeKind.CONTINUE_STATEMENT,
        NodeKind.IF_STATEMENT,
        NodeKind.SWITCH_STATEMENT,
        NodeKind.THROW_STATEMENT,
        NodeKind.TRY_STATEMENT,
        NodeKind.WHILE_STATEMENT,
        NodeKind.DO_WHILE_STATEMENT,
        NodeKind.FOR_STATEMENT,
        NodeKind.FOR_IN_STATEMENT,
        NodeKind.FOR_OF_STATEMENT,
    }
)

# Types missing from NodeKind map to OTHER and never end the walk, even a
# name ending in "Statement". Add new statement kinds to STATEMENT_KINDS.
BOUNDARY_KINDS: frozenset[NodeKind] = STATEMENT_KINDS | {
    NodeKind.ARROW_FUNCTION_EXPRESSION,
    NodeKind.FUNCTION_EXPRESSION,
    NodeKind.CLASS_EXPRESSION,
}


@dataclass(frozen=True)
class Token:
    """A lexical token from the parser's token stream."""

    type: str
    value: str
    range: tuple[int, int]

    @property
    def start(self) -> int:
        return self.range[0]

    @property
    def end(self) -> int:
        return self.range[1]


class SyntaxNode:
    """
    A single ESTree node.

    Kind-specific children (``body``, ``argument``, ``expressions``...) are
    exposed as attributes. The parent link is a weak reference set once by
    the tree builder; the tree owns its nodes top-down.
    """

    def __init__(
        self,
        type: str,
        fields: Optional[dict[str, object]] = None,
        range: Optional[tuple[int, int]] = None,
        loc: Optional[tuple[int, int]] = None,
    ) -> None:
        self.type = type
        self.kind = NodeKind.from_type(type)
        self.range = range
        self.loc = loc
        self.file: Optional[str] = None
        self._fields: dict[str, object] = dict(fields or {})
        self._parent: Optional[weakref.ReferenceType["SyntaxNode"]] = None

    def __getattr__(self, name: str) -> object:
        fields = self.__dict__.get("_fields")
        if fields is not None and name in fields:
            return fields[name]
        raise AttributeError(f"{self.__dict__.get('type', 'SyntaxNode')} node has no field {name!r}")

    def __repr__(self) -> str:
        return f"<SyntaxNode {self.type} range={self.range}>"

    @property
    def parent(self) -> Optional["SyntaxNode"]:
        return self._parent() if self._parent is not None else None

    def attach_to(self, parent: "SyntaxNode") -> None:
        """Record the syntactic parent. Only the tree builder calls this, once per node."""
        if self._parent is not None:
            raise ValueError(f"{self!r} already has a parent")
        self._parent = weakref.ref(parent)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self._fields)

    def get(self, name: str, default: object = None) -> object:
        """Raw ESTree field lookup. Use for fields shadowed by node attributes (e.g. ``kind``)."""
        return self._fields.get(name, default)

    @property
    def line(self) -> Optional[int]:
        return self.loc[0] if self.loc else None

    @property
    def column(self) -> Optional[int]:
        return self.loc[1] if self.loc else None

    def root(self) -> "SyntaxNode":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def ancestors(self) -> Iterator["SyntaxNode"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def children(self) -> list["SyntaxNode"]:
        """Direct child nodes in document order (by start offset when every child has a range)."""
        found: list[SyntaxNode] = []
        for value in self._fields.values():
            if isinstance(value, SyntaxNode):
                found.append(value)
            elif isinstance(value, list):
                found.extend(item for item in value if isinstance(item, SyntaxNode))
        if all(child.range is not None for child in found):
            found.sort(key=lambda child: child.range[0])  # type: ignore[index]
        return found

    def nodes_of_kind(self, kind: NodeKind) -> Iterator["SyntaxNode"]:
        """Pre-order search of this subtree for nodes of ``kind``."""
        if self.kind is kind:
            yield self
        for child in self.children():
            yield from child.nodes_of_kind(kind)
