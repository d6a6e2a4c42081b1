"""Application-level exception types for pipesh."""

from __future__ import annotations


class PipeshError(Exception):
    """Base exception for pipesh."""


class ParseError(PipeshError):
    """Raised when an input line is not a valid command chain."""


class ExecError(PipeshError):
    """Base exception for external command execution failures."""


class SpawnError(ExecError):
    """Raised when the executable cannot be started."""


class StreamError(ExecError):
    """Raised when feeding or draining a child's standard streams fails."""


class ExecTimeoutError(ExecError):
    """Raised when a child outlives the configured command timeout."""


class BuiltinError(PipeshError):
    """Base exception for builtin command failures."""


class DirectoryError(BuiltinError):
    """Raised when a cd target cannot become the working directory."""


class ArgumentError(BuiltinError):
    """Raised when a builtin receives missing or malformed arguments."""
