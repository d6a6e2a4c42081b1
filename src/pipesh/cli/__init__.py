"""CLI front end: line readers, REPL driver and the Typer entry point."""

from .app import app
from .reader import LineReader, PlainLineReader, PromptLineReader, create_line_reader
from .render import Renderer
from .repl import run_repl

__all__ = [
    "LineReader",
    "PlainLineReader",
    "PromptLineReader",
    "Renderer",
    "app",
    "create_line_reader",
    "run_repl",
]
