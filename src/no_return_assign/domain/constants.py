"""Rule identity, messages and terminal banner."""

RULE_SYMBOL: str = "no-return-assign"
TOOL_SECTION: str = "no-return-assign"

RETURN_ASSIGN_MESSAGE: str = "Return statement should not contain assignment."
ARROW_ASSIGN_MESSAGE: str = "Arrow function should not return assignment."

MODE_EXCEPT_PARENS: str = "except-parens"
MODE_ALWAYS: str = "always"
MODE_CHOICES: tuple[str, ...] = (MODE_EXCEPT_PARENS, MODE_ALWAYS)

# Directory expansion picks up ESTree dumps only
TREE_FILE_GLOB: str = "**/*.json"

BANNER: str = "no-return-assign :: assignment-in-return audit"
