"""Refusal gate and the fixed operator-facing texts of the shims."""

from __future__ import annotations

from ..core.constants import EXIT_REFUSED, VIRTUAL_HOSTS
from ..errors import MalformedInvocation, UnsupportedInvocation
from .models import Invocation, Refuse, ShowHelp

FIX_REFUSAL = """\
ERROR: Legacy fix.py action format is not supported by the Go version.

The Python fix.py derived target hosts from trigger/event context
and checked TrustedZabbixUsers. The Go version does not implement
these features.

IMPORTANT: {HOST.HOST} resolves to a virtual host (e.g. vulners.packages),
NOT the actual target machine. Do NOT pass it to ztc fix.

To fix a specific host, run:
  ztc fix --host-name <real-hostname> --dry-run   # preview
  ztc fix --host-name <real-hostname> --force      # execute
"""

PREPARE_HELP = """\
WARNING: prepare.py called with no arguments.
Legacy behavior: show help and exit (no changes made).

To create all Zabbix objects, run:
  ztc prepare --all
  ztc prepare --all --force   # after upgrade from Python version

Available flags:
  -u  check utility paths (no-op in Go)
  -v  create virtual hosts
  -t  create/update templates
  -d  create dashboard"""

FIX_HOST_USAGE = """\
Usage: fix.sh <real-hostname>

WARNING: Do NOT use the {HOST.HOST} macro, it resolves to the
virtual host, not the target machine."""

VIRTUAL_HOST_REFUSAL = """\
ERROR: '{host}' is not a real monitored host.

{reason}
Remediating it would run package commands against a loopback
virtual host instead of the machine that needs fixing.

Pass the technical name of the monitored host, for example:
  fix.sh <real-hostname>
  ztc fix --host-name <real-hostname> --dry-run   # preview"""


def received_line(invocation: Invocation) -> str:
    return "Arguments received: " + " ".join(invocation.tokens)


def refuse(invocation: Invocation) -> Refuse:
    """Refuse an invocation that uses the positional calling convention."""

    message = FIX_REFUSAL + "\n" + received_line(invocation)
    return Refuse(message=message, exit_code=EXIT_REFUSED, reason="unsupported")


def prepare_help() -> ShowHelp:
    return ShowHelp(message=PREPARE_HELP)


def fix_host_usage() -> MalformedInvocation:
    return MalformedInvocation(FIX_HOST_USAGE)


def check_real_host(host: str) -> None:
    """Raise UnsupportedInvocation when ``host`` cannot be a remediation target."""

    if host.startswith("{") and host.endswith("}"):
        reason = "It is an unresolved Zabbix macro."
    elif host.lower() in VIRTUAL_HOSTS:
        reason = "It is one of the virtual hosts created by 'ztc prepare'."
    else:
        return
    raise UnsupportedInvocation(
        VIRTUAL_HOST_REFUSAL.format(host=host, reason=reason)
    )


__all__ = [
    "FIX_HOST_USAGE",
    "FIX_REFUSAL",
    "PREPARE_HELP",
    "check_real_host",
    "fix_host_usage",
    "prepare_help",
    "received_line",
    "refuse",
]
