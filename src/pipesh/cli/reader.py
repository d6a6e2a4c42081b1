"""Line readers feeding the REPL."""

from __future__ import annotations

from typing import Protocol, TextIO

from prompt_toolkit import PromptSession

from pipesh.config import DEFAULT_PROMPT, Settings


class LineReader(Protocol):
    """Source of raw input lines.

    ``read_line`` raises ``EOFError`` when the input is exhausted.
    """

    def read_line(self) -> str: ...


class PlainLineReader:
    """Write the prompt to a text stream and read one line from another."""

    def __init__(self, stdin: TextIO, stdout: TextIO, prompt: str = DEFAULT_PROMPT) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._prompt = prompt

    def read_line(self) -> str:
        self._stdout.write(self._prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")


class PromptLineReader:
    """Line editing through prompt_toolkit, history kept in memory only."""

    def __init__(self, prompt: str = DEFAULT_PROMPT) -> None:
        self._prompt = prompt
        self._prompt_session: PromptSession[str] = PromptSession()

    def read_line(self) -> str:
        try:
            return self._prompt_session.prompt(self._prompt)
        except KeyboardInterrupt:
            # Ctrl-C drops the current line
            return ""


def create_line_reader(settings: Settings, stdin: TextIO, stdout: TextIO) -> LineReader:
    """Create the reader selected by ``settings.line_editor``."""
    if settings.line_editor:
        return PromptLineReader(settings.prompt)
    return PlainLineReader(stdin, stdout, settings.prompt)
