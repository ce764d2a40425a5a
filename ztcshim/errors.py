"""Error taxonomy for the legacy shims."""

from __future__ import annotations

from .core.constants import EXIT_DISPATCH, EXIT_MALFORMED, EXIT_REFUSED


class ShimError(RuntimeError):
    """Base class for failures raised by the shim itself."""

    exit_code: int = EXIT_DISPATCH
    reason: str = "shim"

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class UnsupportedInvocation(ShimError):
    """The legacy calling convention cannot be translated safely."""

    exit_code = EXIT_REFUSED
    reason = "unsupported"


class MalformedInvocation(ShimError):
    """The legacy arguments are incomplete, e.g. a flag is missing its value."""

    exit_code = EXIT_MALFORMED
    reason = "malformed"


class DispatchError(ShimError):
    """The downstream tool could not be started."""

    exit_code = EXIT_DISPATCH
    reason = "dispatch"


class SettingsError(DispatchError):
    """The shim configuration does not describe a usable downstream tool."""


__all__ = [
    "ShimError",
    "UnsupportedInvocation",
    "MalformedInvocation",
    "DispatchError",
    "SettingsError",
]
