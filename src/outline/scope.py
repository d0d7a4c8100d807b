"""Scope stack that nests symbol records during a single walk."""

from __future__ import annotations

from typing import TYPE_CHECKING

from outline.models import SymbolRecord

if TYPE_CHECKING:
    from outline.models import SymbolKind


class ScopeStack:
    """Open container records, innermost on top.

    Only the top record is ever mutated. Finished containers and leaves are
    appended to the record below them, or to ``roots`` when nothing is open,
    in the order they are reported.
    """

    def __init__(self) -> None:
        self._open: list[SymbolRecord] = []
        self.roots: list[SymbolRecord] = []

    @property
    def depth(self) -> int:
        return len(self._open)

    @property
    def top(self) -> SymbolRecord | None:
        return self._open[-1] if self._open else None

    def enter(
        self, kind: SymbolKind, name: str, start_line: int, end_line: int
    ) -> SymbolRecord:
        """Open a new container and make it the attachment point."""
        record = SymbolRecord(
            kind=kind, name=name, start_line=start_line, end_line=end_line
        )
        self._open.append(record)
        return record

    def exit(self) -> SymbolRecord | None:
        """Close the innermost container and attach it to its parent."""
        if not self._open:
            return None
        finished = self._open.pop()
        self.attach(finished)
        return finished

    def attach(self, record: SymbolRecord) -> None:
        """Append a record to the innermost open container (or the roots)."""
        if self._open:
            self._open[-1].members.append(record)
        else:
            self.roots.append(record)


__all__ = ["ScopeStack"]
