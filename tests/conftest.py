from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from pipesh.core.session import Session


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("PIPESH_"):
            monkeypatch.delenv(key)
    # no stray .env file is picked up from the developer's checkout
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def output() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def session(tmp_path: Path, output: io.BytesIO) -> Session:
    return Session(tmp_path, output)
