"""Compatibility shims mapping legacy zabbix-threat-control scripts onto ztc."""

__version__ = "1.0.0"

__all__ = [
    "compat",
    "core",
    "translation",
    "utils",
]
