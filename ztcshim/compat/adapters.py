"""Binds a legacy script entry point to translation and dispatch."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..diagnostics import DiagnosticEmitter
from ..dispatch import Dispatcher
from ..errors import DispatchError
from ..settings import ShimSettings, load_settings
from ..translation import (
    Dispatch,
    Invocation,
    LegacyCommand,
    TranslationResult,
    translate,
)
from ..utils.logging import configure


class LegacyCommandAdapter:
    """Runs one legacy invocation end to end and returns an exit status."""

    def __init__(
        self,
        command: LegacyCommand | str,
        *,
        settings: Optional[ShimSettings] = None,
        emitter: Optional[DiagnosticEmitter] = None,
        dispatcher_factory: Callable[[ShimSettings], Dispatcher] = Dispatcher.from_settings,
    ) -> None:
        self._command = LegacyCommand(command)
        self._settings = settings
        self._emitter = emitter or DiagnosticEmitter()
        self._dispatcher_factory = dispatcher_factory

    @property
    def name(self) -> str:
        return self._command.value

    def translate(self, argv: Sequence[str]) -> TranslationResult:
        return translate(Invocation.of(self._command, argv))

    def __call__(self, argv: Sequence[str]) -> int:
        result = self.translate(argv)
        self._emitter.emit(result)
        if not isinstance(result, Dispatch):
            return result.exit_code
        try:
            settings = self._settings or load_settings()
            configure(settings.log_level)
            return self._dispatcher_factory(settings).run(result)
        except DispatchError as exc:
            self._emitter.refusal(exc.message)
            return exc.exit_code


__all__ = ["LegacyCommandAdapter"]
