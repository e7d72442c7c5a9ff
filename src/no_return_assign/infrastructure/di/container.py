from typing import TYPE_CHECKING, Any, Optional, TypeVar, cast

from no_return_assign.domain.config import ConfigurationLoader
from no_return_assign.infrastructure.config_file_loader import ConfigFileLoader
from no_return_assign.infrastructure.gateways.estree_gateway import EstreeGateway
from no_return_assign.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from no_return_assign.infrastructure.reporters import JsonLintReporter, TerminalLintReporter
from no_return_assign.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from no_return_assign.domain.protocols import (
        FileSystemProtocol,
        LintReporterProtocol,
        TelemetryPort,
        TreeGatewayProtocol,
    )

T = TypeVar("T")


class LintContainer:
    """Dependency Injection Container for the no-return-assign linter."""

    _instance: Optional["LintContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        self.register_singleton(
            "TelemetryPort", ProjectTelemetry("NO-RETURN-ASSIGN", "cyan", "Return audit online"))
        self.register_singleton("EstreeGateway", EstreeGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())

    @classmethod
    def get_instance(cls) -> "LintContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key not in self._singletons:
            raise KeyError(f"No dependency registered for {key!r}")
        return self._singletons[key]

    def get_config_loader(self) -> ConfigurationLoader:
        """Read pyproject.toml lazily; an invalid mode raises here, not at import."""
        if "ConfigurationLoader" not in self._singletons:
            self.register_singleton(
                "ConfigurationLoader", ConfigurationLoader(ConfigFileLoader.load_config_from_fs()))
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_tree_gateway(self) -> "TreeGatewayProtocol":
        return cast("TreeGatewayProtocol", self.get("EstreeGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_reporter(self, output_format: str) -> "LintReporterProtocol":
        if output_format == "json":
            return JsonLintReporter()
        return TerminalLintReporter(self.get_telemetry_port())
