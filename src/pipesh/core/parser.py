"""Command chain parsing."""

from __future__ import annotations

from pipesh.core.types import ChainElement, Command, Piped, Single
from pipesh.errors import ParseError

CHAIN_SEPARATOR = ";"
PIPE_SEPARATOR = "|"


def parse_command(text: str) -> Command:
    """Split one command on whitespace into name and arguments.

    There is no quoting: a token can never contain whitespace.
    """

    words = text.split()
    if not words:
        raise ParseError("no command given")
    return Command(name=words[0], args=tuple(words[1:]))


def parse_chain(line: str) -> list[ChainElement]:
    """Parse an input line into chain elements.

    ``"echo 1; echo 2"`` gives two ``Single`` elements, ``"echo hi | wc -c"``
    gives one ``Piped``. A blank line gives no elements. The first error aborts
    the whole line.
    """

    segments = line.strip().split(CHAIN_SEPARATOR)
    # a trailing separator does not open a new segment
    if segments[-1] == "":
        segments.pop()

    elements: list[ChainElement] = []
    for segment in segments:
        stages = segment.split(PIPE_SEPARATOR)
        if len(stages) == 1:
            elements.append(Single(parse_command(stages[0])))
        elif len(stages) == 2:
            elements.append(Piped(parse_command(stages[0]), parse_command(stages[1])))
        else:
            raise ParseError(f"expected one or two commands, got {segment.strip()!r}")
    return elements
