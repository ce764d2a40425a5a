"""Command-line entry point for the legacy zabbix-threat-control shims."""

from __future__ import annotations

import json
from typing import Optional

import typer

from .compat.adapters import LegacyCommandAdapter
from .core.constants import LEGACY_SCRIPTS
from .diagnostics import DiagnosticEmitter
from .translation import Dispatch, LegacyCommand, translate_args
from .translation.mappings import cluster_renames, describe
from .utils.rich_render import render_mapping_table


app = typer.Typer(
    help=(
        "Run legacy zabbix-threat-control script invocations through ztc. "
        "Pass legacy arguments after '--' when they clash with options "
        "of this tool."
    )
)

_PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}

_TABLE_CAPTIONS = {
    LegacyCommand.FIX: "Every fix.py invocation is refused.",
    LegacyCommand.PREPARE: "No arguments: show help and exit 0 without running ztc.",
    LegacyCommand.SCAN: "No arguments: runs 'ztc scan'.",
    LegacyCommand.FIX_HOST: "fix.sh <real-hostname> runs 'ztc fix --host-name <real-hostname> --force'.",
}


def _build_adapter(command: LegacyCommand) -> LegacyCommandAdapter:
    return LegacyCommandAdapter(command)


@app.command(context_settings=_PASSTHROUGH)
def run(
    ctx: typer.Context,
    command: LegacyCommand = typer.Argument(
        ..., help="Legacy entry point to emulate."
    ),
) -> None:
    """Translate a legacy invocation and run ztc with the result."""

    code = _build_adapter(command)(list(ctx.args))
    raise typer.Exit(code=code)


@app.command(context_settings=_PASSTHROUGH)
def explain(
    ctx: typer.Context,
    command: LegacyCommand = typer.Argument(
        ..., help="Legacy entry point to translate."
    ),
) -> None:
    """Show how a legacy invocation would be translated without running it."""

    result = translate_args(command, list(ctx.args))
    DiagnosticEmitter().emit(result)
    if not isinstance(result, Dispatch):
        raise typer.Exit(code=result.exit_code)
    payload = {
        "legacy": [LEGACY_SCRIPTS[command.value], *ctx.args],
        "argv": ["ztc", *result.argv],
        "warnings": list(result.warnings),
    }
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def mappings(
    command: Optional[LegacyCommand] = typer.Argument(
        None, help="Only show the table for this entry point."
    ),
) -> None:
    """Show the legacy flag mapping tables."""

    selected = [command] if command else list(LegacyCommand)
    for item in selected:
        table = dict(describe(item))
        for legacy, renamed in cluster_renames(item).items():
            table.setdefault(
                f"-{legacy} (in cluster)",
                {"translated": f"-{renamed}", "class": "exact"},
            )
        render_mapping_table(
            LEGACY_SCRIPTS[item.value],
            table,
            caption=_TABLE_CAPTIONS[item],
        )


def main() -> None:
    """Entry point compatible with console_scripts."""

    app()


if __name__ == "__main__":
    main()
