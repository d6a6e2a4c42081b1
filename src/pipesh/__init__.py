"""pipesh - a small interactive command interpreter."""

from .core import Command, Piped, Session, Single, Terminate, execute, parse_chain

__version__ = "0.1.0"

__all__ = ["Command", "Piped", "Session", "Single", "Terminate", "execute", "parse_chain"]
