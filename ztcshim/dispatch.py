"""Runs the downstream ztc binary with a translated argument list."""

from __future__ import annotations

import os
import shlex
import signal
import subprocess
import sys
import threading
from typing import Callable, Dict, List, Sequence

from .core.constants import EXIT_SIGNAL_BASE
from .errors import DispatchError
from .settings import ShimSettings
from .translation.models import Dispatch
from .utils.logging import get_logger

LOGGER = get_logger("ztcshim.dispatch")

FORWARDED_SIGNALS = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGTERM", "SIGHUP")
    if hasattr(signal, name)
)


def _unavailable(path: str, detail: str) -> DispatchError:
    return DispatchError(
        f"ERROR: cannot run {path}: {detail}.\n"
        "\n"
        "The ztc package provides this binary. Reinstall it, or point the\n"
        "shim at the installed location with ztc_path in /etc/ztc-shim.yaml\n"
        "or the ZTC_SHIM_BINARY environment variable."
    )


class Dispatcher:
    """Executes ``ztc <command> <args...>`` and reports its exit status.

    ``exec`` mode replaces the current process image, so the scheduler's
    signals reach ztc directly. ``spawn`` mode waits for a child process and
    forwards termination signals to it.
    """

    def __init__(
        self,
        ztc_path: str,
        *,
        mode: str = "exec",
        execv: Callable[[str, Sequence[str]], int] = os.execv,
    ) -> None:
        if not os.path.isabs(ztc_path):
            raise _unavailable(ztc_path, "path is not absolute")
        self.ztc_path = ztc_path
        self.mode = mode
        self._execv = execv

    @classmethod
    def from_settings(cls, settings: ShimSettings) -> "Dispatcher":
        return cls(settings.ztc_path, mode=settings.dispatch_mode)

    def command_line(self, dispatch: Dispatch) -> List[str]:
        return [self.ztc_path, *dispatch.argv]

    def check(self) -> None:
        if not os.path.exists(self.ztc_path):
            raise _unavailable(self.ztc_path, "no such file")
        if not os.path.isfile(self.ztc_path):
            raise _unavailable(self.ztc_path, "not a regular file")
        if not os.access(self.ztc_path, os.X_OK):
            raise _unavailable(self.ztc_path, "permission denied")

    def run(self, dispatch: Dispatch) -> int:
        """Run ztc and return its exit status.

        Raises:
            DispatchError: ztc is missing, not executable or failed to start.
        """

        argv = self.command_line(dispatch)
        self.check()
        LOGGER.debug("Dispatching (%s): %s", self.mode, shlex.join(argv))
        if self.mode == "exec":
            return self._exec(argv)
        return self._spawn(argv)

    def _exec(self, argv: List[str]) -> int:
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            # os.execv never returns; a substitute returns the exit status.
            return self._execv(self.ztc_path, argv)
        except OSError as exc:
            raise _unavailable(self.ztc_path, exc.strerror or str(exc)) from exc

    def _spawn(self, argv: List[str]) -> int:
        child: Dict[str, subprocess.Popen] = {}
        pending: List[int] = []

        def _forward(signum, _frame) -> None:
            process = child.get("process")
            if process is None:
                pending.append(signum)
            elif process.poll() is None:
                process.send_signal(signum)

        # Handlers go in before the child starts so no signal is missed.
        previous: Dict[int, object] = {}
        if threading.current_thread() is threading.main_thread():
            for signum in FORWARDED_SIGNALS:
                previous[signum] = signal.signal(signum, _forward)
        try:
            try:
                process = subprocess.Popen(argv)
            except OSError as exc:
                raise _unavailable(
                    self.ztc_path, exc.strerror or str(exc)
                ) from exc
            child["process"] = process
            for signum in pending:
                process.send_signal(signum)
            returncode = process.wait()
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

        if returncode < 0:
            return EXIT_SIGNAL_BASE - returncode
        return returncode


__all__ = ["Dispatcher", "FORWARDED_SIGNALS"]
