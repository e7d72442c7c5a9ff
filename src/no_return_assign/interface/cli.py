"""CLI entry points for no-return-assign - Thin Controller using Typer."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from no_return_assign.domain.config import ConfigurationLoader
from no_return_assign.domain.exceptions import NoReturnAssignError
from no_return_assign.domain.protocols import (
    FileSystemProtocol,
    LintReporterProtocol,
    TelemetryPort,
    TreeGatewayProtocol,
)
from no_return_assign.use_cases.lint_files import LintFilesUseCase


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    load_config: Callable[[], ConfigurationLoader]
    telemetry: TelemetryPort
    tree_gateway: TreeGatewayProtocol
    filesystem: FileSystemProtocol
    reporter_for: Callable[[str], LintReporterProtocol]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="no-return-assign",
            help="Flag assignments used as return values or concise arrow bodies in ESTree JSON trees.",
            add_completion=False,
        )

        @app.callback()
        def main() -> None:
            """no-return-assign: disallow assignment operators in return statements."""

        @app.command()
        def check(
            paths: list[Path] = typer.Argument(..., help="ESTree JSON files or directories to check"),  # noqa: B008
            mode: Optional[str] = typer.Option(
                None, "--mode", "-m", help="except-parens (default) or always"),
            output_format: OutputFormat = typer.Option(
                OutputFormat.TABLE, "--format", "-f", help="Output format"),
        ) -> None:
            """Check trees for assignments in return statements and arrow bodies."""
            deps.telemetry.handshake()
            try:
                config_loader = deps.load_config().with_mode(mode)
                use_case = LintFilesUseCase(
                    tree_gateway=deps.tree_gateway,
                    filesystem=deps.filesystem,
                    telemetry=deps.telemetry,
                    config_loader=config_loader,
                )
                result = use_case.execute([str(p) for p in paths])
            except NoReturnAssignError as e:
                deps.telemetry.error(str(e))
                raise typer.Exit(code=2) from e

            deps.reporter_for(output_format.value).report(result)
            raise typer.Exit(code=result.exit_code())

        return app
