"""Declarative flag tables for each legacy entry point."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from .models import FlagMapping, LegacyCommand, MappingClass

DUMP_WARNING = "WARNING: --dump is approximated as --dry-run (no disk dump)."


def _table(entries: Iterable[FlagMapping]) -> Mapping[str, FlagMapping]:
    return MappingProxyType({entry.legacy: entry for entry in entries})


# Global flags of the downstream tool that take a value. Recognised on every
# command so their values are never mistaken for flag clusters.
GLOBAL_FLAGS = (
    FlagMapping("-c", "-c", MappingClass.EXACT, takes_value=True),
    FlagMapping("--config", "--config", MappingClass.EXACT, takes_value=True),
)

FIX_FLAGS: Mapping[str, FlagMapping] = _table(())

PREPARE_FLAGS: Mapping[str, FlagMapping] = _table(
    (
        FlagMapping("-u", "-u", MappingClass.NO_OP),
        FlagMapping("-v", "-V", MappingClass.EXACT),
        FlagMapping("-t", "-t", MappingClass.EXACT),
        FlagMapping("-d", "-d", MappingClass.EXACT),
        FlagMapping("--vhosts", "--virtual-hosts", MappingClass.EXACT),
        FlagMapping("--template", "--templates", MappingClass.EXACT),
        *GLOBAL_FLAGS,
    )
)

SCAN_FLAGS: Mapping[str, FlagMapping] = _table(
    (
        FlagMapping("-n", "--nopush", MappingClass.EXACT),
        FlagMapping("--nopush", "--nopush", MappingClass.EXACT),
        FlagMapping("-l", "--limit", MappingClass.EXACT, takes_value=True),
        FlagMapping("--limit", "--limit", MappingClass.EXACT, takes_value=True),
        FlagMapping(
            "-d",
            "--dry-run",
            MappingClass.APPROXIMATE,
            warning=DUMP_WARNING,
        ),
        FlagMapping(
            "--dump",
            "--dry-run",
            MappingClass.APPROXIMATE,
            warning=DUMP_WARNING,
        ),
        *GLOBAL_FLAGS,
    )
)

# fix-host builds its own argv; only the globals are meaningful there.
FIX_HOST_FLAGS: Mapping[str, FlagMapping] = _table(GLOBAL_FLAGS)

FLAG_TABLES: Mapping[LegacyCommand, Mapping[str, FlagMapping]] = MappingProxyType(
    {
        LegacyCommand.FIX: FIX_FLAGS,
        LegacyCommand.PREPARE: PREPARE_FLAGS,
        LegacyCommand.SCAN: SCAN_FLAGS,
        LegacyCommand.FIX_HOST: FIX_HOST_FLAGS,
    }
)

# Character renames applied inside short-flag clusters only. `v` collides
# with the downstream global --verbose flag.
CLUSTER_RENAMES: Mapping[LegacyCommand, Mapping[str, str]] = MappingProxyType(
    {
        LegacyCommand.PREPARE: MappingProxyType({"v": "V"}),
    }
)


def flag_table(command: LegacyCommand) -> Mapping[str, FlagMapping]:
    return FLAG_TABLES[command]


def cluster_renames(command: LegacyCommand) -> Mapping[str, str]:
    return CLUSTER_RENAMES.get(command, MappingProxyType({}))


def describe(command: LegacyCommand) -> Dict[str, Dict[str, object]]:
    """Return the mapping table for ``command`` as plain data."""

    return {
        legacy: {
            "translated": entry.translated,
            "class": entry.classification.value,
            "takes_value": entry.takes_value,
            "warning": entry.warning,
        }
        for legacy, entry in flag_table(command).items()
    }


__all__ = [
    "CLUSTER_RENAMES",
    "DUMP_WARNING",
    "FLAG_TABLES",
    "GLOBAL_FLAGS",
    "cluster_renames",
    "describe",
    "flag_table",
]
