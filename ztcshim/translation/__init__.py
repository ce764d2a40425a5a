"""Translation of legacy script arguments onto the ztc command line."""

from .models import (
    Classification,
    Dispatch,
    FlagMapping,
    Invocation,
    LegacyCommand,
    MappingClass,
    Refuse,
    ShowHelp,
    TranslationResult,
)
from .translator import translate, translate_args

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
    "translate",
    "translate_args",
]
