"""
Constants for the legacy command shims.

This module defines the exit codes, the downstream tool location and the
names the downstream tool uses for each action.
"""

# Installed location of the consolidated tool. Never resolved through PATH.
DEFAULT_ZTC_PATH = "/usr/bin/ztc"

# Optional shim configuration file
DEFAULT_CONFIG_PATH = "/etc/ztc-shim.yaml"

# Environment overrides
ENV_CONFIG_PATH = "ZTC_SHIM_CONFIG"
ENV_BINARY = "ZTC_SHIM_BINARY"
ENV_DISPATCH_MODE = "ZTC_SHIM_DISPATCH_MODE"
ENV_LOG_LEVEL = "ZTC_SHIM_LOG_LEVEL"

DISPATCH_MODES = ("exec", "spawn")

# Exit codes (BSD sysexits), chosen so they never overlap the downstream
# tool's own 0/1 results.
EXIT_OK = 0
EXIT_MALFORMED = 64      # EX_USAGE
EXIT_DISPATCH = 69       # EX_UNAVAILABLE
EXIT_REFUSED = 77        # EX_NOPERM
EXIT_SIGNAL_BASE = 128

# Downstream subcommand for each legacy entry point
DOWNSTREAM_COMMANDS = {
    "fix": "fix",
    "prepare": "prepare",
    "scan": "scan",
    "fix-host": "fix",
}

# Virtual hosts created by `ztc prepare`. They carry loopback interfaces and
# are never valid remediation targets.
VIRTUAL_HOSTS = (
    "vulners.hosts",
    "vulners.packages",
    "vulners.bulletins",
    "vulners.statistics",
)

# Script names the legacy entry points were installed under
LEGACY_SCRIPTS = {
    "fix": "fix.py",
    "prepare": "prepare.py",
    "scan": "scan.py",
    "fix-host": "fix.sh",
}
