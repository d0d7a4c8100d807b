"""Parser-facing contract consumed by the outline walker."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from outline.models import Binding, SymbolKind


class SyntaxAdapter(Protocol):
    """Read-only view over a parsed syntax tree.

    Nodes are opaque to the walker. Every accessor must tolerate nodes with
    missing optional parts (no name, no parameter clause, no bindings) and
    answer with an empty value instead of raising.
    """

    def declaration_kind(self, node: Any) -> SymbolKind | None:
        """Kind of declaration rooted at ``node``, or None for other nodes."""
        ...

    def children(self, node: Any) -> Sequence[Any]:
        """Child nodes in document order."""
        ...

    def declared_name(self, node: Any) -> str:
        """Identifier declared by a type-like or function declaration."""
        ...

    def extended_type(self, node: Any) -> str:
        """Trimmed text of the type an extension applies to."""
        ...

    def parameter_clause(self, node: Any) -> str:
        """Trimmed parameter clause text including parentheses, or ""."""
        ...

    def first_binding(self, node: Any) -> Binding | None:
        """First binding of a variable declaration group."""
        ...

    def start_line(self, node: Any) -> int:
        """1-indexed line of the first token after leading trivia."""
        ...

    def end_line(self, node: Any) -> int:
        """1-indexed line of the last token before trailing trivia."""
        ...


__all__ = ["SyntaxAdapter"]
