"""Value types shared by the translation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class LegacyCommand(str, Enum):
    """Legacy entry points that the shims replace."""

    FIX = "fix"
    PREPARE = "prepare"
    SCAN = "scan"
    FIX_HOST = "fix-host"


class MappingClass(str, Enum):
    """How faithfully a translated flag reproduces the legacy one."""

    EXACT = "exact"
    APPROXIMATE = "approximate"
    NO_OP = "no-op"
    UNSUPPORTED = "unsupported"


class Classification(str, Enum):
    """Outcome of inspecting a legacy argument vector."""

    NO_ARGS = "no-args"
    POSITIONAL_UNSUPPORTED = "positional-unsupported"
    FLAG_STYLE = "flag-style"


@dataclass(frozen=True, slots=True)
class Invocation:
    """One legacy invocation as received from the caller."""

    command: LegacyCommand
    tokens: Tuple[str, ...] = ()

    @classmethod
    def of(cls, command: LegacyCommand | str, tokens) -> "Invocation":
        return cls(command=LegacyCommand(command), tokens=tuple(tokens))


@dataclass(frozen=True, slots=True)
class FlagMapping:
    """Maps one legacy flag spelling onto the downstream tool."""

    legacy: str
    translated: Optional[str]
    classification: MappingClass = MappingClass.EXACT
    takes_value: bool = False
    warning: Optional[str] = None

    @property
    def is_lossy(self) -> bool:
        return self.classification is MappingClass.APPROXIMATE


@dataclass(frozen=True, slots=True)
class Dispatch:
    """Translated arguments ready to hand to the downstream tool.

    ``warnings`` is non-empty for the warn-then-dispatch path.
    """

    command: str
    args: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def argv(self) -> Tuple[str, ...]:
        return (self.command, *self.args)


@dataclass(frozen=True, slots=True)
class Refuse:
    """Translation was refused; nothing is executed."""

    message: str
    exit_code: int
    reason: str = "unsupported"


@dataclass(frozen=True, slots=True)
class ShowHelp:
    """Legacy no-argument behaviour: explain and exit without side effects."""

    message: str
    exit_code: int = 0


TranslationResult = Union[Dispatch, Refuse, ShowHelp]


__all__ = [
    "Classification",
    "Dispatch",
    "FlagMapping",
    "Invocation",
    "LegacyCommand",
    "MappingClass",
    "Refuse",
    "ShowHelp",
    "TranslationResult",
]
