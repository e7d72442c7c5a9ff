"""Project telemetry: user-facing console lines mirrored into the package logger."""

import logging

from rich.console import Console

from no_return_assign.domain.constants import BANNER


class ProjectTelemetry:
    """TelemetryPort implementation. Console via rich on stderr, records via logging."""

    def __init__(self, name: str, color: str, welcome: str) -> None:
        self.name = name
        self.color = color
        self.welcome = welcome
        self.console = Console(stderr=True)
        self.logger = logging.getLogger("no_return_assign")

    def handshake(self) -> None:
        self.console.print(BANNER, style="bold cyan", markup=False, highlight=False)
        self.console.print(f"[{self.name}] {self.welcome}", style=self.color, markup=False)
        self.logger.info("%s session started", self.name)

    def step(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.console.print(f"error: {message}", style="bold red", markup=False)
        self.logger.error(message)

    def warning(self, message: str) -> None:
        self.console.print(f"warning: {message}", style="yellow", markup=False)
        self.logger.warning(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
