from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from no_return_assign.domain.nodes import SyntaxNode
    from no_return_assign.domain.protocols import TokenAccessor
    from no_return_assign.domain.rules import Violation


@dataclass(frozen=True)
class SyntaxTree:
    """A loaded tree: the owning root node plus its token stream."""

    root: "SyntaxNode"
    tokens: "TokenAccessor"
    path: Optional[str] = None


@dataclass(frozen=True)
class LintResult:
    """Result of linting a batch of tree files."""

    violations: list["Violation"] = field(default_factory=list)
    files_checked: int = 0
    failed_files: list[str] = field(default_factory=list)

    def has_violations(self) -> bool:
        return bool(self.violations)

    def exit_code(self) -> int:
        """2 when any file failed to load, 1 for violations, else 0."""
        if self.failed_files:
            return 2
        return 1 if self.violations else 0

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for the JSON reporter."""
        return {
            "violations": [
                {"code": v.code, "message": v.message, "location": v.location}
                for v in self.violations
            ],
            "files_checked": self.files_checked,
            "failed_files": list(self.failed_files),
        }
