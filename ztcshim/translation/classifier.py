"""Decides whether a legacy invocation can be translated."""

from __future__ import annotations

from .models import Classification, Invocation, LegacyCommand

# Commands whose legacy contract relied on positional context arguments
# ({HOST.HOST} {TRIGGER.ID} {EVENT.ID}) that cannot be resolved any more.
POSITIONAL_COMMANDS = frozenset({LegacyCommand.FIX})


def classify(invocation: Invocation) -> Classification:
    if invocation.command in POSITIONAL_COMMANDS:
        return Classification.POSITIONAL_UNSUPPORTED
    if not invocation.tokens:
        return Classification.NO_ARGS
    return Classification.FLAG_STYLE


__all__ = ["POSITIONAL_COMMANDS", "classify"]
