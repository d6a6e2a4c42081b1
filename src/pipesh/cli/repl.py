"""Interactive read-parse-dispatch loop."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from pipesh.cli.reader import LineReader
from pipesh.cli.render import Renderer
from pipesh.core.parser import parse_chain
from pipesh.core.session import Session
from pipesh.errors import ParseError, PipeshError


def run_repl(session: Session, reader: LineReader, *, renderer: Optional[Renderer] = None) -> int:
    """Run until ``exit`` and return its exit code.

    Malformed lines and aborted pipes are dropped and the loop carries on.
    ``EOFError`` and ``OSError`` raised by ``reader`` propagate.
    """

    while True:
        line = reader.read_line()

        try:
            chain = parse_chain(line)
        except ParseError as exc:
            _discard(line, exc, renderer)
            continue

        try:
            outcome = session.run(chain)
        except PipeshError as exc:
            _discard(line, exc, renderer)
            continue

        if outcome is not None:
            logger.debug("exit requested with code {}", outcome.code)
            return outcome.code


def _discard(line: str, exc: PipeshError, renderer: Optional[Renderer]) -> None:
    logger.debug("discarding line {!r}: {}", line, exc)
    if renderer is not None:
        renderer.error(str(exc))
