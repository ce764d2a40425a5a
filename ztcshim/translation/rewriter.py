"""Token-level rewriting of legacy flags onto the downstream flag surface.

Every token is handled in exactly one of these ways:

* ``--`` stops rewriting; it and the rest of the tokens are copied as-is.
* long flags (``--name`` or ``--name=value``) are looked up in the table;
* short tokens (``-x``) are looked up whole, then treated as a cluster;
* anything else is positional data and is copied unchanged.

Character renames only ever happen inside :func:`rename_cluster`, which
refuses tokens that are not short-flag clusters.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Tuple

from ..errors import MalformedInvocation, UnsupportedInvocation
from .models import FlagMapping, MappingClass

END_OF_OPTIONS = "--"


def is_long_flag(token: str) -> bool:
    return token.startswith("--") and len(token) > 2


def is_short_token(token: str) -> bool:
    return len(token) > 1 and token[0] == "-" and token[1] != "-"


def is_short_cluster(token: str) -> bool:
    """Return True for ``-abc`` style tokens made only of flag letters."""

    body = token[1:]
    return is_short_token(token) and body.isascii() and body.isalpha()


def rename_cluster(token: str, renames: Mapping[str, str]) -> str:
    """Rename characters inside a single short-flag cluster.

    >>> rename_cluster("-uvtd", {"v": "V"})
    '-uVtd'
    """

    if not is_short_cluster(token):
        raise ValueError(f"not a short-flag cluster: {token!r}")
    return "-" + "".join(renames.get(char, char) for char in token[1:])


class _Rewrite:
    """Single pass over one token sequence."""

    def __init__(
        self,
        tokens: Sequence[str],
        table: Mapping[str, FlagMapping],
        renames: Mapping[str, str],
        program: str,
    ) -> None:
        self.tokens = tuple(tokens)
        self.table = table
        self.renames = renames
        self.program = program
        self.position = 0
        self.output: List[str] = []
        self.warnings: List[str] = []

    def run(self) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        while self.position < len(self.tokens):
            token = self._next()
            if token == END_OF_OPTIONS:
                self.output.append(token)
                self.output.extend(self.tokens[self.position:])
                break
            if is_long_flag(token):
                self._long(token)
            elif is_short_token(token):
                self._short(token)
            else:
                self.output.append(token)
        return tuple(self.output), tuple(self.warnings)

    def _next(self) -> str:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _accept(self, entry: FlagMapping) -> str:
        if entry.classification is MappingClass.UNSUPPORTED:
            detail = entry.warning or "it has no equivalent in ztc"
            raise UnsupportedInvocation(
                f"ERROR: legacy flag '{entry.legacy}' is not supported: {detail}"
            )
        if entry.warning and entry.warning not in self.warnings:
            self.warnings.append(entry.warning)
        return entry.translated or entry.legacy

    def _apply(self, entry: FlagMapping, attached: Optional[str] = None) -> None:
        self.output.append(self._accept(entry))
        if entry.takes_value:
            self._take_value(entry, attached)

    def _take_value(self, entry: FlagMapping, attached: Optional[str]) -> None:
        if attached is not None:
            self.output.append(attached)
        elif self.position < len(self.tokens):
            self.output.append(self._next())
        else:
            raise self._missing_value(entry)

    def _long(self, token: str) -> None:
        name, separator, attached = token.partition("=")
        entry = self.table.get(name)
        if entry is None:
            self.output.append(token)
        elif not separator:
            self._apply(entry)
        elif entry.takes_value:
            self.output.append(f"{self._accept(entry)}={attached}")
        else:
            raise MalformedInvocation(
                f"ERROR: legacy flag '{entry.legacy}' does not take a value "
                f"(received '{token}').\n"
                "\n"
                "Pass the flag on its own:\n"
                f"  {self.program} {entry.legacy}"
            )

    def _short(self, token: str) -> None:
        entry = self.table.get(token)
        if entry is not None:
            self._apply(entry)
            return
        if self.renames and is_short_cluster(token):
            self._rename(token)
            return
        expanded = self._expand(token)
        if expanded is None:
            self.output.append(token)
            return
        for entry, attached in expanded:
            self._apply(entry, attached)

    def _rename(self, token: str) -> None:
        """Rename flag letters up to the first value-taking flag.

        Whatever follows that flag is its value and is split off unchanged.
        """

        for index, char in enumerate(token[1:], start=2):
            entry = self.table.get("-" + char)
            if entry is not None and entry.takes_value:
                self.output.append(rename_cluster(token[:index], self.renames))
                self._take_value(entry, token[index:] or None)
                return
        self.output.append(rename_cluster(token, self.renames))

    def _expand(
        self, token: str
    ) -> Optional[List[Tuple[FlagMapping, Optional[str]]]]:
        """Split ``-nl5`` style clusters into known flags, or return None."""

        parts: List[Tuple[FlagMapping, Optional[str]]] = []
        body = token[1:]
        for index, char in enumerate(body):
            entry = self.table.get("-" + char)
            if entry is None:
                return None
            if entry.takes_value:
                parts.append((entry, body[index + 1:] or None))
                return parts
            parts.append((entry, None))
        return parts

    def _missing_value(self, entry: FlagMapping) -> MalformedInvocation:
        return MalformedInvocation(
            f"ERROR: legacy flag '{entry.legacy}' expects a value but none "
            "was given.\n"
            "\n"
            "Pass the value as the next argument, for example:\n"
            f"  {self.program} {entry.legacy} <value>"
        )


def rewrite(
    tokens: Sequence[str],
    table: Mapping[str, FlagMapping],
    renames: Optional[Mapping[str, str]] = None,
    *,
    program: str = "ztc",
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Translate ``tokens`` and return ``(arguments, warnings)``.

    ``program`` is the legacy script name used in remediation text.

    Raises:
        MalformedInvocation: a value-taking flag has no value, or a flag
            that takes none was given one.
        UnsupportedInvocation: a flag is mapped as unsupported.
    """

    return _Rewrite(tokens, table, renames or {}, program).run()


__all__ = [
    "END_OF_OPTIONS",
    "is_long_flag",
    "is_short_cluster",
    "is_short_token",
    "rename_cluster",
    "rewrite",
]
