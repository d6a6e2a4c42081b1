"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Command:
    """An executable name plus its ordered arguments."""

    name: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return " ".join((self.name, *self.args))


@dataclass(frozen=True)
class Single:
    """A chain element holding one command."""

    command: Command

    def __str__(self) -> str:
        return str(self.command)


@dataclass(frozen=True)
class Piped:
    """A chain element whose first stage output feeds the second stage input."""

    first: Command
    second: Command

    def __str__(self) -> str:
        return f"{self.first} | {self.second}"


ChainElement = Union[Single, Piped]


@dataclass(frozen=True)
class Terminate:
    """Request to end the interactive run with the given exit code."""

    code: int = 0
