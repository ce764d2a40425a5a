"""Regression harness for the legacy script entry points.

Each shim runs against a mock ztc binary that records the arguments it
receives, mirroring how the old scripts were exercised.
"""

from __future__ import annotations

import sys

import pytest

from ztcshim.compat import LegacyCommandAdapter
from ztcshim.compat import entrypoints
from ztcshim.core.constants import EXIT_DISPATCH, EXIT_MALFORMED, EXIT_REFUSED
from ztcshim.dispatch import Dispatcher

pytestmark = pytest.mark.skipif(
    sys.platform.startswith("win"), reason="mock ztc binary is a POSIX shell script"
)


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        ([], "scan"),
        (["-n"], "scan --nopush"),
        (["--nopush"], "scan --nopush"),
        (["-d"], "scan --dry-run"),
        (["-l", "5"], "scan --limit 5"),
        (["-n", "-l", "10"], "scan --nopush --limit 10"),
    ],
)
def test_scan_shim(mock_ztc, argv, expected) -> None:
    assert LegacyCommandAdapter("scan")(argv) == 0
    assert mock_ztc.received() == expected


def test_scan_dump_warns_on_stderr(mock_ztc, capsys) -> None:
    LegacyCommandAdapter("scan")(["--dump"])

    captured = capsys.readouterr()
    assert "WARNING" in captured.err
    assert "no disk dump" in captured.err
    assert captured.out == ""
    assert mock_ztc.calls() == ["scan", "--dry-run"]


def test_scan_missing_limit_value_never_dispatches(mock_ztc, capsys) -> None:
    assert LegacyCommandAdapter("scan")(["--limit"]) == EXIT_MALFORMED
    assert mock_ztc.calls() is None
    assert "expects a value" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["-uvtd"], "prepare -uVtd"),
        (["-v"], "prepare -V"),
        (["--force"], "prepare --force"),
        (["-vt", "--force"], "prepare -Vt --force"),
        (["--vhosts"], "prepare --virtual-hosts"),
        (["--template"], "prepare --templates"),
        (
            ["--vhosts", "--template", "--force"],
            "prepare --virtual-hosts --templates --force",
        ),
    ],
)
def test_prepare_shim(mock_ztc, argv, expected) -> None:
    assert LegacyCommandAdapter("prepare")(argv) == 0
    assert mock_ztc.received() == expected


def test_prepare_without_arguments_does_not_dispatch(mock_ztc, capsys) -> None:
    assert LegacyCommandAdapter("prepare")([]) == 0
    assert mock_ztc.calls() is None
    assert "WARNING" in capsys.readouterr().err


def test_fix_is_refused_without_dispatch(mock_ztc, capsys) -> None:
    code = LegacyCommandAdapter("fix")(["vulners.hosts", "12345", "67890"])

    assert code == EXIT_REFUSED
    assert mock_ztc.calls() is None
    err = capsys.readouterr().err
    assert "ERROR: Legacy fix.py" in err
    assert "virtual host" in err
    assert "vulners.hosts 12345 67890" in err


def test_fix_with_no_arguments_is_refused(mock_ztc) -> None:
    assert LegacyCommandAdapter("fix")([]) == EXIT_REFUSED
    assert mock_ztc.calls() is None


def test_fix_refusal_does_not_need_settings(monkeypatch) -> None:
    monkeypatch.setenv("ZTC_SHIM_BINARY", "relative/ztc")
    assert LegacyCommandAdapter("fix")(["x"]) == EXIT_REFUSED


def test_fix_host_without_arguments_shows_usage(mock_ztc, capsys) -> None:
    assert LegacyCommandAdapter("fix-host")([]) == EXIT_MALFORMED
    assert "Usage:" in capsys.readouterr().err
    assert mock_ztc.calls() is None


def test_fix_host_dispatches_forced_fix(mock_ztc) -> None:
    assert LegacyCommandAdapter("fix-host")(["webserver01"]) == 0
    assert mock_ztc.received() == "fix --host-name webserver01 --force"


def test_downstream_status_and_output_pass_through(failing_ztc, capfd) -> None:
    assert LegacyCommandAdapter("scan")(["-n"]) == 3
    assert capfd.readouterr().err == "scan failed\n"


def test_missing_binary_reports_dispatch_error(capsys) -> None:
    assert LegacyCommandAdapter("scan")(["-n"]) == EXIT_DISPATCH
    err = capsys.readouterr().err
    assert "ERROR: cannot run" in err
    assert "no such file" in err


def test_invalid_settings_report_dispatch_error(monkeypatch, capsys) -> None:
    monkeypatch.setenv("ZTC_SHIM_DISPATCH_MODE", "fork")
    assert LegacyCommandAdapter("scan")([]) == EXIT_DISPATCH
    assert "dispatch_mode" in capsys.readouterr().err


def test_explicit_settings_and_factory_are_used(mock_ztc) -> None:
    seen = []

    def _factory(settings):
        seen.append(settings)
        return Dispatcher.from_settings(settings)

    adapter = LegacyCommandAdapter(
        "scan", settings=mock_ztc.settings, dispatcher_factory=_factory
    )

    assert adapter.name == "scan"
    assert adapter(["-n"]) == 0
    assert seen == [mock_ztc.settings]


@pytest.mark.parametrize(
    ("function", "argv", "expected_code"),
    [
        (entrypoints.fix, ["fix.py", "vulners.hosts"], EXIT_REFUSED),
        (entrypoints.prepare, ["prepare.py"], 0),
        (entrypoints.scan, ["scan.py", "-n"], 0),
        (entrypoints.fix_host, ["fix.sh", "web01"], 0),
    ],
)
def test_console_entrypoints_exit_with_status(mock_ztc, monkeypatch, function, argv, expected_code) -> None:
    monkeypatch.setattr(sys, "argv", argv)

    with pytest.raises(SystemExit) as excinfo:
        function()

    assert excinfo.value.code == expected_code
