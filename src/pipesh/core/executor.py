"""External process execution."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

from loguru import logger

from pipesh.core.types import Command
from pipesh.errors import ExecTimeoutError, SpawnError, StreamError


def execute(
    command: Command,
    cwd: Path,
    stdin_bytes: Optional[bytes] = None,
    *,
    timeout: Optional[float] = None,
) -> bytes:
    """Run ``command`` in ``cwd`` and return everything it wrote to stdout.

    ``stdin_bytes`` is written to the child's stdin, which is then closed; when it
    is ``None`` stdin is closed straight away. Writing and reading happen together
    inside ``communicate``, so a child that fills its stdout pipe before draining
    its input cannot stall the session. stderr is inherited from the parent.

    A non-zero exit status is not an error. When ``timeout`` elapses the child is
    killed and :class:`ExecTimeoutError` is raised.
    """

    argv = [command.name, *command.args]
    try:
        # Running operator-supplied programs is the point of the shell.
        process = subprocess.Popen(  # noqa: S603
            argv,
            cwd=cwd,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
        )
    except (OSError, ValueError, subprocess.SubprocessError) as exc:
        raise SpawnError(f"{command.name}: {exc}") from exc

    with process:
        try:
            stdout, _ = process.communicate(input=stdin_bytes, timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            process.kill()
            process.communicate()
            raise ExecTimeoutError(f"{command.name}: timed out after {timeout}s") from exc
        except OSError as exc:
            process.kill()
            raise StreamError(f"{command.name}: {exc}") from exc

    if process.returncode != 0:
        logger.debug("command {} exited with status {}", command, process.returncode)
    return stdout
