"""Shim configuration loaded from an optional YAML file and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .core.constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_ZTC_PATH,
    DISPATCH_MODES,
    ENV_BINARY,
    ENV_CONFIG_PATH,
    ENV_DISPATCH_MODE,
    ENV_LOG_LEVEL,
)
from .errors import SettingsError
from .utils.logging import get_logger

LOGGER = get_logger("ztcshim.settings")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_KNOWN_KEYS = {"ztc_path", "dispatch_mode", "log_level"}


@dataclass(slots=True)
class ShimSettings:
    """Resolved shim configuration."""

    ztc_path: str = DEFAULT_ZTC_PATH
    dispatch_mode: str = "exec"
    log_level: str = "WARNING"
    source: Optional[str] = None

    def validate(self) -> None:
        if not os.path.isabs(self.ztc_path):
            raise SettingsError(
                f"ERROR: ztc_path must be an absolute path, got '{self.ztc_path}'.\n"
                f"Set it to the installed binary, e.g. {DEFAULT_ZTC_PATH}"
            )
        if self.dispatch_mode not in DISPATCH_MODES:
            raise SettingsError(
                f"ERROR: unknown dispatch_mode '{self.dispatch_mode}'. "
                f"Expected one of: {', '.join(DISPATCH_MODES)}"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise SettingsError(
                f"ERROR: unknown log_level '{self.log_level}'. "
                f"Expected one of: {', '.join(sorted(_LOG_LEVELS))}"
            )


def _read_config(path: Path) -> Mapping[str, Any]:
    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SettingsError(f"ERROR: cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SettingsError(f"ERROR: invalid YAML in {path}: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise SettingsError(f"ERROR: {path} must contain a mapping of settings")
    unknown = sorted(set(payload) - _KNOWN_KEYS)
    if unknown:
        LOGGER.warning("Ignoring unknown keys in %s: %s", path, ", ".join(unknown))
    return payload


def load_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ShimSettings:
    """Resolve settings: defaults, then the YAML file, then the environment.

    An explicitly requested config file must exist; the default location is
    only read when present.
    """

    env = os.environ if environ is None else environ
    settings = ShimSettings()

    explicit = config_path or env.get(ENV_CONFIG_PATH)
    path = Path(explicit) if explicit else Path(DEFAULT_CONFIG_PATH)
    if explicit or path.is_file():
        payload = _read_config(path)
        for key in _KNOWN_KEYS:
            if key in payload and payload[key] is not None:
                setattr(settings, key, str(payload[key]))
        settings.source = str(path)

    if env.get(ENV_BINARY):
        settings.ztc_path = env[ENV_BINARY]
    if env.get(ENV_DISPATCH_MODE):
        settings.dispatch_mode = env[ENV_DISPATCH_MODE].strip().lower()
    if env.get(ENV_LOG_LEVEL):
        settings.log_level = env[ENV_LOG_LEVEL].strip().upper()

    settings.validate()
    return settings


__all__ = ["ShimSettings", "load_settings"]
