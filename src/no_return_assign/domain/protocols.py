from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from no_return_assign.domain.entities import LintResult, SyntaxTree
    from no_return_assign.domain.nodes import SyntaxNode, Token


class TokenAccessor(Protocol):
    """Token-stream lookups by source position."""

    def token_before(self, node: "SyntaxNode") -> Optional["Token"]:
        """Return the token immediately preceding ``node``, or None at the start of the file."""
        ...

    def token_after(self, node: "SyntaxNode") -> Optional["Token"]:
        """Return the token immediately following ``node``, or None at the end of the file."""
        ...

    def __len__(self) -> int:
        ...


class TreeGatewayProtocol(Protocol):
    """Protocol for loading syntax trees built by an external parser."""

    def load_file(self, path: str) -> "SyntaxTree":
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def glob_tree_files(self, path: str) -> list[str]:
        """Get all ESTree JSON files in path (recursive if directory)."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class LintReporterProtocol(Protocol):
    """Protocol for rendering lint results."""

    def report(self, result: "LintResult") -> None:
        ...
