"""Diagnostics renderer for pipesh."""

from rich.console import Console
from rich.markup import escape

from pipesh.core.types import ChainElement
from pipesh.errors import PipeshError


class Renderer:
    """Render shell diagnostics to stderr using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console(stderr=True, highlight=False)

    def error(self, message: str) -> None:
        """Render an error message."""
        self.console.print(f"[bold red]pipesh:[/bold red] {escape(message)}")

    def command_error(self, element: ChainElement, exc: PipeshError) -> None:
        """Render an error swallowed while running one chain element."""
        self.error(str(exc) or f"{element}: {type(exc).__name__}")


def create_cli_renderer() -> Renderer:
    """Create and return a Renderer instance."""
    return Renderer()
