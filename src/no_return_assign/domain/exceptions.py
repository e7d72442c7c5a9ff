"""Domain exceptions. Raised at the edges; the classifier itself never raises."""


class NoReturnAssignError(Exception):
    """Base class for errors raised by this package."""


class InvalidRuleOptionError(NoReturnAssignError, ValueError):
    """A rule option value falls outside the accepted enumeration."""

    def __init__(self, value: object, choices: tuple[str, ...]) -> None:
        self.value = value
        self.choices = choices
        super().__init__(
            f"Invalid option {value!r}: expected one of {', '.join(repr(c) for c in choices)}"
        )


class TreeLoadError(NoReturnAssignError):
    """A syntax tree file could not be read or is not an ESTree document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
