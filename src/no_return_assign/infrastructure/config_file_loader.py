"""Load [tool.no-return-assign] from pyproject.toml. Infrastructure I/O only."""

import sys
from pathlib import Path
from typing import Optional

from no_return_assign.domain.constants import TOOL_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml, searching upward."""

    @staticmethod
    def find_pyproject(start: Optional[Path] = None) -> Optional[Path]:
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            candidate = directory / "pyproject.toml"
            if candidate.is_file():
                return candidate
        return None

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Return the [tool.no-return-assign] table, or {} when absent or unreadable."""
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return {}
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except (OSError, toml_lib.TOMLDecodeError):
            return {}
        tool_section = data.get("tool", {}) or {}
        config_dict = tool_section.get(TOOL_SECTION, {}) or {}
        return config_dict if isinstance(config_dict, dict) else {}
