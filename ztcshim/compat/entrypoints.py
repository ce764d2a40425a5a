"""Console-script entry points standing in for the legacy scripts.

Each takes ``sys.argv`` verbatim; no option parsing happens before
translation.
"""

from __future__ import annotations

import sys

from ..translation import LegacyCommand
from .adapters import LegacyCommandAdapter


def _run(command: LegacyCommand) -> None:
    adapter = LegacyCommandAdapter(command)
    raise SystemExit(adapter(sys.argv[1:]))


def fix() -> None:
    """Replacement for ``fix.py {HOST.HOST} {TRIGGER.ID} {EVENT.ID}``."""

    _run(LegacyCommand.FIX)


def prepare() -> None:
    """Replacement for ``prepare.py -uvtd``."""

    _run(LegacyCommand.PREPARE)


def scan() -> None:
    """Replacement for ``scan.py`` service items."""

    _run(LegacyCommand.SCAN)


def fix_host() -> None:
    """Replacement for ``fix.sh <real-hostname>``."""

    _run(LegacyCommand.FIX_HOST)


__all__ = ["fix", "fix_host", "prepare", "scan"]
