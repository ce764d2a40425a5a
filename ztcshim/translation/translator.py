"""Per-invocation translation pipeline: classify, gate, rewrite."""

from __future__ import annotations

from typing import Sequence

from ..core.constants import DOWNSTREAM_COMMANDS, LEGACY_SCRIPTS
from ..errors import ShimError
from ..utils.logging import get_logger
from .classifier import classify
from .mappings import cluster_renames, flag_table
from .models import (
    Classification,
    Dispatch,
    Invocation,
    LegacyCommand,
    Refuse,
    TranslationResult,
)
from .refusal import check_real_host, fix_host_usage, prepare_help, refuse
from .rewriter import rewrite

LOGGER = get_logger("ztcshim.translation")


def _fix_host_args(tokens: Sequence[str]) -> tuple[str, ...]:
    if len(tokens) != 1 or tokens[0].startswith("-") or not tokens[0].strip():
        raise fix_host_usage()
    host = tokens[0]
    check_real_host(host)
    return ("--host-name", host, "--force")


def _no_args(invocation: Invocation) -> TranslationResult:
    command = invocation.command
    if command is LegacyCommand.PREPARE:
        return prepare_help()
    if command is LegacyCommand.FIX_HOST:
        error = fix_host_usage()
        return Refuse(error.message, error.exit_code, reason=error.reason)
    return Dispatch(command=DOWNSTREAM_COMMANDS[command.value])


def translate(invocation: Invocation) -> TranslationResult:
    """Translate one legacy invocation into a dispatch, help or refusal."""

    classification = classify(invocation)
    LOGGER.debug(
        "Classified %s %s as %s",
        invocation.command.value,
        list(invocation.tokens),
        classification.value,
    )
    if classification is Classification.POSITIONAL_UNSUPPORTED:
        return refuse(invocation)
    if classification is Classification.NO_ARGS:
        return _no_args(invocation)

    command = invocation.command
    downstream = DOWNSTREAM_COMMANDS[command.value]
    try:
        if command is LegacyCommand.FIX_HOST:
            return Dispatch(downstream, _fix_host_args(invocation.tokens))
        args, warnings = rewrite(
            invocation.tokens,
            flag_table(command),
            cluster_renames(command),
            program=LEGACY_SCRIPTS[command.value],
        )
    except ShimError as exc:
        LOGGER.debug("Refusing %s: %s", command.value, exc.reason)
        return Refuse(exc.message, exc.exit_code, reason=exc.reason)
    return Dispatch(downstream, args, warnings)


def translate_args(
    command: LegacyCommand | str, tokens: Sequence[str]
) -> TranslationResult:
    return translate(Invocation.of(command, tokens))


__all__ = ["translate", "translate_args"]
