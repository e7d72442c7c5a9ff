"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from no_return_assign.infrastructure.di.container import LintContainer
from no_return_assign.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = LintContainer.get_instance()
    deps = CLIDependencies(
        load_config=container.get_config_loader,
        telemetry=container.get_telemetry_port(),
        tree_gateway=container.get_tree_gateway(),
        filesystem=container.get_filesystem_gateway(),
        reporter_for=container.get_reporter,
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
