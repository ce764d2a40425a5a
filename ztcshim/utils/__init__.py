"""Utility helpers shared by the shims."""
