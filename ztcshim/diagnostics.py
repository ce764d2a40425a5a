"""Operator-facing diagnostics, always written to stderr."""

from __future__ import annotations

from typing import IO, Optional

import typer

from .translation.models import Dispatch, Refuse, ShowHelp, TranslationResult


class DiagnosticEmitter:
    """Writes warning and refusal text to the error channel.

    Output is plain deterministic text; colour is only added when the
    stream is a terminal.
    """

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self._stream = stream

    def warning(self, text: str) -> None:
        typer.secho(text, file=self._stream, err=True, fg=typer.colors.YELLOW)

    def refusal(self, text: str) -> None:
        typer.secho(text, file=self._stream, err=True, fg=typer.colors.RED)

    def emit(self, result: TranslationResult) -> None:
        if isinstance(result, Dispatch):
            for warning in result.warnings:
                self.warning(warning)
        elif isinstance(result, ShowHelp):
            self.warning(result.message)
        elif isinstance(result, Refuse):
            self.refusal(result.message)
        else:  # pragma: no cover - exhaustive over TranslationResult
            raise TypeError(f"Unexpected translation result: {result!r}")


__all__ = ["DiagnosticEmitter"]
