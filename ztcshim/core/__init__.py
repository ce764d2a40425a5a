"""Shared constants for the legacy shims."""
