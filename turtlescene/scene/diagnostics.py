"""
Non-fatal diagnostics raised while interpreting a program.

Flags are OR-accumulated over a run and only cleared by a Reset command.
Rendering lists the raised flags in the fixed order of DiagnosticFlag.
"""

from collections.abc import Iterable, Iterator
from enum import Enum


class DiagnosticFlag(Enum):
    """Known diagnostic conditions; declaration order is the canonical order."""

    UNHANDLED_COMMAND = "unhandled command"
    POPLOC_ON_EMPTY_STACK = "poploc on empty stack"
    POPROT_ON_EMPTY_STACK = "poprot on empty stack"


class DiagnosticFlags:
    """Set of raised DiagnosticFlag values."""

    __slots__ = ("_flags",)

    def __init__(self, flags: Iterable[DiagnosticFlag] = ()):
        self._flags: set[DiagnosticFlag] = set(flags)

    def set(self, flag: DiagnosticFlag) -> None:
        self._flags.add(flag)

    def clear(self) -> None:
        self._flags.clear()

    def names(self) -> list[str]:
        return [flag.value for flag in self]

    def __contains__(self, flag: object) -> bool:
        return flag in self._flags

    def __iter__(self) -> Iterator[DiagnosticFlag]:
        return (flag for flag in DiagnosticFlag if flag in self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __bool__(self) -> bool:
        return bool(self._flags)

    def __or__(self, other: "DiagnosticFlags") -> "DiagnosticFlags":
        return DiagnosticFlags(self._flags | other._flags)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DiagnosticFlags):
            return self._flags == other._flags
        if isinstance(other, (set, frozenset)):
            return self._flags == other
        return NotImplemented

    def __str__(self) -> str:
        return ", ".join(self.names())

    def __repr__(self) -> str:
        inner = ", ".join(flag.name for flag in self)
        return f"DiagnosticFlags({{{inner}}})"
