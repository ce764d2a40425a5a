"""Shared fixtures for the shim test-suite."""
from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import List

import pytest

from ztcshim.settings import ShimSettings


@dataclass
class MockZtc:
    """Executable stand-in for /usr/bin/ztc that records its argv."""

    path: Path
    args_file: Path

    def calls(self) -> List[str] | None:
        if not self.args_file.exists():
            return None
        return self.args_file.read_text(encoding="utf-8").splitlines()

    def received(self) -> str | None:
        calls = self.calls()
        return None if calls is None else " ".join(calls)

    @property
    def settings(self) -> ShimSettings:
        return ShimSettings(ztc_path=str(self.path), dispatch_mode="spawn")


def _write_mock(directory: Path, body: str) -> MockZtc:
    args_file = directory / "args"
    script = directory / "ztc"
    script.write_text(
        "#!/bin/sh\n"
        f'for arg in "$@"; do echo "$arg"; done > "{args_file}"\n'
        f"{body}\n",
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return MockZtc(path=script, args_file=args_file)


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Never exec over the test process and never read /etc."""

    config = tmp_path / "ztc-shim.yaml"
    config.write_text("", encoding="utf-8")
    monkeypatch.setenv("ZTC_SHIM_CONFIG", str(config))
    monkeypatch.setenv("ZTC_SHIM_DISPATCH_MODE", "spawn")
    monkeypatch.setenv("ZTC_SHIM_BINARY", str(tmp_path / "missing" / "ztc"))
    monkeypatch.delenv("ZTC_SHIM_LOG_LEVEL", raising=False)


@pytest.fixture
def mock_ztc(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> MockZtc:
    directory = tmp_path / "bin"
    directory.mkdir()
    mock = _write_mock(directory, "exit 0")
    monkeypatch.setenv("ZTC_SHIM_BINARY", str(mock.path))
    return mock


@pytest.fixture
def failing_ztc(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> MockZtc:
    directory = tmp_path / "failing"
    directory.mkdir()
    mock = _write_mock(directory, 'echo "scan failed" >&2\nexit 3')
    monkeypatch.setenv("ZTC_SHIM_BINARY", str(mock.path))
    return mock


@pytest.fixture
def killed_ztc(tmp_path: Path) -> MockZtc:
    directory = tmp_path / "killed"
    directory.mkdir()
    return _write_mock(directory, "kill -TERM $$")


@pytest.fixture
def not_executable(tmp_path: Path) -> Path:
    path = tmp_path / "plain" / "ztc"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    os.chmod(path, 0o644)
    return path


@dataclass
class TrappingZtc(MockZtc):
    """Long-running stand-in that records the signal it is stopped with."""

    ready_file: Path = Path()
    signal_file: Path = Path()


@pytest.fixture
def trapping_ztc(tmp_path: Path) -> TrappingZtc:
    directory = tmp_path / "trapping"
    directory.mkdir()
    ready_file = directory / "ready"
    signal_file = directory / "signal"
    body = (
        f"trap 'echo TERM > \"{signal_file}\"; kill $sleeper 2>/dev/null; "
        "trap - TERM; kill -TERM $$' TERM\n"
        "sleep 30 &\n"
        "sleeper=$!\n"
        f'touch "{ready_file}"\n'
        "wait $sleeper"
    )
    mock = _write_mock(directory, body)
    return TrappingZtc(
        path=mock.path,
        args_file=mock.args_file,
        ready_file=ready_file,
        signal_file=signal_file,
    )
