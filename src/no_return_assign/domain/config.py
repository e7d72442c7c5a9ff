"""Rule mode and configuration. Immutable value objects created by Infrastructure."""

from collections.abc import Sequence
from enum import Enum
from typing import Optional

from no_return_assign.domain.constants import MODE_ALWAYS, MODE_CHOICES, MODE_EXCEPT_PARENS
from no_return_assign.domain.exceptions import InvalidRuleOptionError


class Mode(Enum):
    """How strictly parenthesized assignments are treated."""

    EXCEPT_PARENS = MODE_EXCEPT_PARENS
    ALWAYS = MODE_ALWAYS

    @classmethod
    def parse(cls, value: object) -> "Mode":
        """Validate a single option value against the accepted enumeration."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or value not in MODE_CHOICES:
            raise InvalidRuleOptionError(value, MODE_CHOICES)
        return cls(value)

    @classmethod
    def from_options(cls, options: Optional[Sequence[object]]) -> "Mode":
        """Read the first positional option; absent or empty means except-parens."""
        if not options or options[0] is None:
            return cls.EXCEPT_PARENS
        return cls.parse(options[0])


class ConfigurationLoader:
    """
    Immutable configuration for the lint run.

    Created by Infrastructure from the ``[tool.no-return-assign]`` table of the
    nearest pyproject.toml. Domain does not read the filesystem. Values are
    validated at construction, so a bad mode fails before any tree is walked.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        self._config = config_dict
        self._mode = Mode.from_options([config_dict.get("mode")])
        self._exclude_paths = self._read_exclude_paths(config_dict)

    @staticmethod
    def _read_exclude_paths(config: dict[str, object]) -> tuple[str, ...]:
        raw = config.get("exclude_paths", [])
        if isinstance(raw, list):
            return tuple(str(x) for x in raw if isinstance(x, str))
        return ()

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def exclude_paths(self) -> tuple[str, ...]:
        """Path fragments skipped when expanding input paths."""
        return self._exclude_paths

    def with_mode(self, mode: Optional[str]) -> "ConfigurationLoader":
        """Return a copy with ``mode`` overridden (CLI flag wins over file config)."""
        if mode is None:
            return self
        merged = dict(self._config)
        merged["mode"] = mode
        return ConfigurationLoader(merged)

    def is_excluded(self, path: str) -> bool:
        return any(fragment in path for fragment in self._exclude_paths)
