"""Legacy entry point adapters."""

from .adapters import LegacyCommandAdapter

__all__ = ["LegacyCommandAdapter"]
