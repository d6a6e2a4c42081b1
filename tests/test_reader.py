import io

import pytest

from pipesh.cli.reader import PlainLineReader, PromptLineReader, create_line_reader
from pipesh.config import Settings


def test_plain_reader_writes_prompt_and_strips_newline() -> None:
    stdout = io.StringIO()
    reader = PlainLineReader(io.StringIO("echo hi\r\nls\n"), stdout)
    assert reader.read_line() == "echo hi"
    assert reader.read_line() == "ls"
    assert stdout.getvalue() == "> > "


def test_plain_reader_last_line_without_newline() -> None:
    reader = PlainLineReader(io.StringIO("exit"), io.StringIO())
    assert reader.read_line() == "exit"


def test_plain_reader_raises_on_end_of_input() -> None:
    reader = PlainLineReader(io.StringIO(""), io.StringIO())
    with pytest.raises(EOFError):
        reader.read_line()


def test_blank_line_is_not_end_of_input() -> None:
    reader = PlainLineReader(io.StringIO("\n"), io.StringIO())
    assert reader.read_line() == ""


def test_custom_prompt() -> None:
    stdout = io.StringIO()
    reader = create_line_reader(Settings(prompt="$ "), io.StringIO("x\n"), stdout)
    reader.read_line()
    assert stdout.getvalue() == "$ "


def test_default_reader_is_plain() -> None:
    assert isinstance(create_line_reader(Settings(), io.StringIO(), io.StringIO()), PlainLineReader)


def test_line_editor_reader_selected(monkeypatch: pytest.MonkeyPatch) -> None:
    class _FakePromptSession:
        def prompt(self, message: str) -> str:
            raise KeyboardInterrupt

    monkeypatch.setattr("pipesh.cli.reader.PromptSession", _FakePromptSession)
    reader = create_line_reader(Settings(line_editor=True), io.StringIO(), io.StringIO())
    assert isinstance(reader, PromptLineReader)
    assert reader.read_line() == ""
