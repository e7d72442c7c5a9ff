from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    symbol: str
    display_name: str
    short_description: str
    category: str
    recommended: bool
    fixable: bool
    options: list[str]
    messages: dict[str, str]
