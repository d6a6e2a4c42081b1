"""Core modules for pipesh."""

from .executor import execute
from .parser import parse_chain, parse_command
from .session import Session
from .types import ChainElement, Command, Piped, Single, Terminate

__all__ = [
    "ChainElement",
    "Command",
    "Piped",
    "Session",
    "Single",
    "Terminate",
    "execute",
    "parse_chain",
    "parse_command",
]
