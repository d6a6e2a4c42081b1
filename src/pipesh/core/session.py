"""Session state and chain dispatch."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterable
from functools import partial
from pathlib import Path
from typing import BinaryIO, Optional, Union

from loguru import logger

from pipesh.core.executor import execute
from pipesh.core.types import ChainElement, Command, Piped, Terminate
from pipesh.errors import ArgumentError, DirectoryError, PipeshError

EXIT_CODE_RE = re.compile(r"[+-]?[0-9]+")
EXIT_CODE_MIN = -(2**31)
EXIT_CODE_MAX = 2**31 - 1

ErrorHook = Callable[[ChainElement, PipeshError], None]
BuiltinResult = Union[Terminate, None]


class Session:
    """Working directory and history for one interactive run.

    The working directory is tracked here and handed to each child. The parent
    process never calls ``os.chdir``.
    """

    def __init__(
        self,
        cwd: Path,
        stdout: BinaryIO,
        *,
        timeout: Optional[float] = None,
        on_error: Optional[ErrorHook] = None,
    ) -> None:
        self._cwd = cwd.resolve(strict=True)
        self._stdout = stdout
        self._timeout = timeout
        self._on_error = on_error
        self._history: list[str] = []
        self._builtins: dict[str, Callable[[Command], BuiltinResult]] = {
            "cd": self._builtin_cd,
            "exit": self._builtin_exit,
            "history": self._builtin_history,
        }

    @property
    def cwd(self) -> Path:
        return self._cwd

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    def run(self, chain: Iterable[ChainElement]) -> Optional[Terminate]:
        """Dispatch the elements of one parsed line in order.

        Failures stay local to their element, except a failing first stage of a
        pipe, which raises and abandons the rest of the line. ``exit`` stops the
        line and returns the :class:`Terminate` request to the caller.

        Every element is recorded in history before it runs, pipes included as
        ``"first | second"``, so ``history`` lists them too.
        """

        for element in chain:
            self._history.append(str(element))
            if isinstance(element, Piped):
                upstream = self._execute(element.first)
                outcome = self._guard(element, partial(self._execute, element.second, upstream))
            else:
                outcome = self._guard(element, partial(self._dispatch, element.command))

            if isinstance(outcome, Terminate):
                return outcome
            if outcome:
                self._write(outcome)
        return None

    def _guard(
        self, element: ChainElement, action: Callable[[], Union[bytes, BuiltinResult]]
    ) -> Union[bytes, BuiltinResult]:
        try:
            return action()
        except PipeshError as exc:
            logger.debug("discarding {!r}: {}", str(element), exc)
            if self._on_error is not None:
                self._on_error(element, exc)
            return None

    def _dispatch(self, command: Command) -> Union[bytes, BuiltinResult]:
        builtin = self._builtins.get(command.name)
        if builtin is not None:
            return builtin(command)
        return self._execute(command)

    def _execute(self, command: Command, stdin_bytes: Optional[bytes] = None) -> bytes:
        return execute(command, self._cwd, stdin_bytes, timeout=self._timeout)

    def _write(self, data: bytes) -> None:
        self._stdout.write(data)
        self._stdout.flush()

    def _builtin_cd(self, command: Command) -> None:
        if len(command.args) != 1:
            raise ArgumentError("cd: expected a single path")

        try:
            target = (self._cwd / command.args[0]).resolve(strict=True)
        except (OSError, RuntimeError, ValueError) as exc:
            raise DirectoryError(f"cd: {command.args[0]}: {exc}") from exc
        if not target.is_dir():
            raise DirectoryError(f"cd: {command.args[0]}: not a directory")
        if not os.access(target, os.X_OK):
            raise DirectoryError(f"cd: {command.args[0]}: permission denied")

        self._cwd = target
        return None

    def _builtin_exit(self, command: Command) -> Terminate:
        if not command.args:
            return Terminate(0)
        raw_code = command.args[0]
        if EXIT_CODE_RE.fullmatch(raw_code) is None:
            raise ArgumentError(f"exit: {raw_code}: numeric argument required")
        code = int(raw_code)
        if not EXIT_CODE_MIN <= code <= EXIT_CODE_MAX:
            raise ArgumentError(f"exit: {raw_code}: exit code out of range")
        return Terminate(code)

    def _builtin_history(self, _command: Command) -> None:
        # The entry for this very invocation was recorded before dispatch.
        listing = self._history[:-1]
        if listing:
            self._write("".join(f"{entry}\n" for entry in listing).encode("utf-8"))
        return None
