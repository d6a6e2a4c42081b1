"""CLI main module for pipesh."""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from loguru import logger

from pipesh.cli.reader import create_line_reader
from pipesh.cli.render import create_cli_renderer
from pipesh.cli.repl import run_repl
from pipesh.config import get_settings
from pipesh.core.session import Session
from pipesh.logging_utils import configure_logging

app = typer.Typer(
    name="pipesh",
    help="Interactive command interpreter with ; chains and single pipes.",
    add_completion=False,
)


@app.command()
def shell() -> None:
    """Start the interactive shell."""
    settings = get_settings()
    configure_logging(settings.log_level, profile=settings.log_profile)

    renderer = create_cli_renderer()
    session = Session(
        Path.cwd(),
        sys.stdout.buffer,
        timeout=settings.command_timeout,
        on_error=renderer.command_error if settings.report_errors else None,
    )
    reader = create_line_reader(settings, sys.stdin, sys.stdout)

    try:
        code = run_repl(session, reader, renderer=renderer if settings.report_errors else None)
    except EOFError as exc:
        renderer.error(f"input closed: {exc}")
        raise typer.Exit(1) from exc
    except (OSError, UnicodeDecodeError) as exc:
        logger.opt(exception=exc).debug("input failure")
        renderer.error(f"cannot read input: {exc}")
        raise typer.Exit(1) from exc

    raise typer.Exit(code)


if __name__ == "__main__":
    app()
