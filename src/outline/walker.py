"""Single-pass outline walker over a parsed Swift syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from outline.models import BODY_KINDS, TYPE_KINDS, UNKNOWN_NAME, SymbolRecord
from outline.scope import ScopeStack
from outline.type_inference import infer_binding_type

if TYPE_CHECKING:
    from collections.abc import Callable

    from outline.models import SymbolKind
    from outline.syntax import SyntaxAdapter


@dataclass(frozen=True)
class _Leave:
    """Work-list marker scheduled after the children of a container."""

    body: bool


_LEAVE_TYPE = _Leave(body=False)
_LEAVE_BODY = _Leave(body=True)


class OutlineWalker:
    """Collect a nested symbol outline from one syntax tree at a time.

    Type-like declarations are always containers. Functions, initializers
    and deinitializers are leaves by default; with ``deep=True`` they become
    containers too, and variables declared anywhere inside their bodies are
    dropped as locals.

    Traversal uses an explicit work list, so arbitrarily nested trees do not
    depend on the interpreter's recursion limit. A walker keeps per-walk
    state and must not be shared between threads.
    """

    def __init__(
        self,
        adapter: SyntaxAdapter,
        *,
        deep: bool = False,
        infer_types: bool = False,
    ) -> None:
        self._adapter = adapter
        self._deep = deep
        self._infer_types = infer_types
        self._scopes = ScopeStack()
        self._function_depth = 0

        dispatch: dict[SymbolKind, Callable[[Any, SymbolKind], _Leave | None]] = {}
        for kind in TYPE_KINDS:
            dispatch[kind] = self._visit_type
        dispatch["extension"] = self._visit_extension
        for kind in BODY_KINDS:
            dispatch[kind] = self._visit_body
        dispatch["var"] = self._visit_variable
        self._dispatch = dispatch

    def walk(self, root: Any) -> list[SymbolRecord]:
        """Walk ``root`` in document order and return the top-level symbols."""
        self._scopes = ScopeStack()
        self._function_depth = 0

        pending: list[Any] = [root]
        while pending:
            item = pending.pop()
            if isinstance(item, _Leave):
                self._leave(item)
                continue

            kind = self._adapter.declaration_kind(item)
            if kind is None:
                self._schedule_children(pending, item)
                continue

            leave = self._dispatch[kind](item, kind)
            if leave is not None:
                pending.append(leave)
                self._schedule_children(pending, item)

        return self._scopes.roots

    def _schedule_children(self, pending: list[Any], node: Any) -> None:
        pending.extend(reversed(self._adapter.children(node)))

    def _leave(self, marker: _Leave) -> None:
        if marker.body:
            self._function_depth -= 1
        self._scopes.exit()

    def _enter(self, node: Any, kind: SymbolKind, name: str) -> None:
        self._scopes.enter(
            kind,
            name,
            self._adapter.start_line(node),
            self._adapter.end_line(node),
        )

    def _leaf(
        self,
        node: Any,
        kind: SymbolKind,
        name: str,
        type_label: str | None = None,
    ) -> None:
        self._scopes.attach(
            SymbolRecord(
                kind=kind,
                name=name,
                start_line=self._adapter.start_line(node),
                end_line=self._adapter.end_line(node),
                type=type_label,
            )
        )

    def _visit_type(self, node: Any, kind: SymbolKind) -> _Leave | None:
        self._enter(node, kind, self._adapter.declared_name(node))
        return _LEAVE_TYPE

    def _visit_extension(self, node: Any, kind: SymbolKind) -> _Leave | None:
        self._enter(node, kind, self._adapter.extended_type(node))
        return _LEAVE_TYPE

    def _visit_body(self, node: Any, kind: SymbolKind) -> _Leave | None:
        name = self._body_name(node, kind)
        if not self._deep:
            self._leaf(node, kind, name)
            return None

        self._function_depth += 1
        self._enter(node, kind, name)
        return _LEAVE_BODY

    def _visit_variable(self, node: Any, kind: SymbolKind) -> _Leave | None:
        if self._deep and self._function_depth > 0:
            return None

        binding = self._adapter.first_binding(node)
        name = UNKNOWN_NAME
        if binding is not None and binding.pattern:
            name = binding.pattern
        type_label = infer_binding_type(binding) if self._infer_types else None
        self._leaf(node, kind, name, type_label)
        return None

    def _body_name(self, node: Any, kind: SymbolKind) -> str:
        if kind == "init":
            return "init" + self._adapter.parameter_clause(node)
        if kind == "deinit":
            return "deinit"
        return self._adapter.declared_name(node)


def extract_outline(
    root: Any,
    adapter: SyntaxAdapter,
    *,
    deep: bool = False,
    infer_types: bool = False,
) -> list[SymbolRecord]:
    """Walk ``root`` with a fresh walker and return its top-level symbols."""
    walker = OutlineWalker(adapter, deep=deep, infer_types=infer_types)
    return walker.walk(root)


__all__ = ["OutlineWalker", "extract_outline"]
