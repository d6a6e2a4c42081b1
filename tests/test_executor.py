from pathlib import Path

import pytest

from pipesh.core.executor import execute
from pipesh.core.types import Command
from pipesh.errors import ExecTimeoutError, SpawnError


def test_echo_output(tmp_path: Path) -> None:
    assert execute(Command("echo", ("X",)), tmp_path) == b"X\n"


def test_runs_in_given_directory(tmp_path: Path) -> None:
    (tmp_path / "marker.txt").write_text("", encoding="utf-8")
    assert execute(Command("ls"), tmp_path) == b"marker.txt\n"


def test_stdin_bytes_are_fed_to_child(tmp_path: Path) -> None:
    assert execute(Command("wc", ("-c",)), tmp_path, b"hi\n").strip() == b"3"


def test_stdin_closed_when_no_input(tmp_path: Path) -> None:
    assert execute(Command("cat"), tmp_path) == b""


def test_large_input_does_not_deadlock(tmp_path: Path) -> None:
    payload = b"0123456789abcdef" * (1 << 16)
    assert execute(Command("cat"), tmp_path, payload, timeout=30) == payload


def test_non_zero_exit_still_returns_stdout(tmp_path: Path) -> None:
    assert execute(Command("sh", ("-c", "echo out; exit 3")), tmp_path) == b"out\n"


def test_child_that_ignores_input(tmp_path: Path) -> None:
    assert execute(Command("true"), tmp_path, b"x" * (1 << 20)) == b""


def test_raw_bytes_are_preserved(tmp_path: Path) -> None:
    assert execute(Command("printf", ("\\377\\376",)), tmp_path) == b"\xff\xfe"


def test_missing_executable_is_spawn_error(tmp_path: Path) -> None:
    with pytest.raises(SpawnError):
        execute(Command("pipesh-definitely-missing-binary"), tmp_path)


def test_missing_cwd_is_spawn_error(tmp_path: Path) -> None:
    with pytest.raises(SpawnError):
        execute(Command("echo", ("hi",)), tmp_path / "missing")


def test_non_executable_file_is_spawn_error(tmp_path: Path) -> None:
    script = tmp_path / "script.sh"
    script.write_text("#!/bin/sh\necho hi\n", encoding="utf-8")
    script.chmod(0o644)
    with pytest.raises(SpawnError):
        execute(Command(str(script)), tmp_path)


def test_timeout_kills_child(tmp_path: Path) -> None:
    with pytest.raises(ExecTimeoutError, match="timed out"):
        execute(Command("sleep", ("5",)), tmp_path, timeout=0.2)


def test_embedded_null_byte_is_spawn_error(tmp_path: Path) -> None:
    with pytest.raises(SpawnError):
        execute(Command("echo", ("a\x00b",)), tmp_path)
