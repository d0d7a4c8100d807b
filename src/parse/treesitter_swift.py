"""Tree-sitter based parsing and outline extraction for Swift sources."""

from __future__ import annotations

import threading
from functools import lru_cache
from typing import TYPE_CHECKING

from tree_sitter import Language, Node, Parser, Tree
from tree_sitter_language_pack import get_language

from outline.models import Binding
from outline.walker import extract_outline

if TYPE_CHECKING:
    from collections.abc import Sequence

    from outline.models import SymbolKind, SymbolRecord

GRAMMAR_NAME = "swift"

# Extras the grammar may attach at the edges of a declaration.
TRIVIA_NODE_TYPES = frozenset({"comment", "multiline_comment"})

# `class_declaration` covers every nominal type; its keyword picks the kind.
CLASS_KEYWORD_KINDS: dict[str, SymbolKind] = {
    "class": "class",
    "struct": "struct",
    "actor": "actor",
    "enum": "enum",
    "extension": "extension",
}

DECLARATION_NODE_KINDS: dict[str, SymbolKind] = {
    "protocol_declaration": "protocol",
    "function_declaration": "func",
    "protocol_function_declaration": "func",
    "init_declaration": "init",
    "deinit_declaration": "deinit",
    "property_declaration": "var",
    "protocol_property_declaration": "var",
}

# Leading part of a protocol property pattern (`var name`) that is not the name.
_BINDING_KEYWORD_TYPE = "value_binding_pattern"

_THREAD_STATE = threading.local()


@lru_cache(maxsize=1)
def _get_language() -> Language:
    return get_language(GRAMMAR_NAME)


def _get_parser() -> Parser:
    """Return this thread's Tree-sitter parser for Swift."""
    parser: Parser | None = getattr(_THREAD_STATE, "parser", None)
    if parser is None:
        parser = Parser(_get_language())
        _THREAD_STATE.parser = parser
    return parser


def parse_swift(source: bytes) -> Tree:
    """Parse Swift source bytes. Syntax errors become ERROR/MISSING nodes."""
    return _get_parser().parse(source)


def _code_edge(node: Node, *, from_end: bool) -> Node:
    """Descend to the first (or last) token of ``node`` that is not trivia."""
    current = node
    while current.child_count:
        children = reversed(current.children) if from_end else current.children
        edge = next((c for c in children if c.type not in TRIVIA_NODE_TYPES), None)
        if edge is None:
            break
        current = edge
    return current


class TreeSitterSwiftAdapter:
    """Expose a Tree-sitter Swift tree through the outline walker's contract."""

    def __init__(self, source: bytes) -> None:
        self._source = source

    def _slice(self, start_byte: int, end_byte: int) -> str:
        raw = self._source[start_byte:end_byte]
        return raw.decode("utf-8", errors="replace").strip()

    def _text(self, node: Node | None) -> str:
        if node is None:
            return ""
        return self._slice(node.start_byte, node.end_byte)

    def declaration_kind(self, node: Node) -> SymbolKind | None:
        if node.type == "class_declaration":
            keyword = node.child_by_field_name("declaration_kind")
            if keyword is not None and keyword.type in CLASS_KEYWORD_KINDS:
                return CLASS_KEYWORD_KINDS[keyword.type]
            for child in node.children:
                if child.type in CLASS_KEYWORD_KINDS:
                    return CLASS_KEYWORD_KINDS[child.type]
            return "class"
        return DECLARATION_NODE_KINDS.get(node.type)

    def children(self, node: Node) -> Sequence[Node]:
        return node.children

    def declared_name(self, node: Node) -> str:
        return self._text(node.child_by_field_name("name"))

    def extended_type(self, node: Node) -> str:
        return self._text(node.child_by_field_name("name"))

    def parameter_clause(self, node: Node) -> str:
        open_paren: Node | None = None
        for child in node.children:
            if open_paren is None:
                if child.type == "(":
                    open_paren = child
            elif child.type == ")":
                return self._slice(open_paren.start_byte, child.end_byte)
        return ""

    def first_binding(self, node: Node) -> Binding | None:
        pattern: Node | None = None
        annotation: Node | None = None
        initializer: Node | None = None
        expect_value = False

        for child in node.children:
            if pattern is None:
                if child.type == "pattern":
                    pattern = child
                continue
            if child.type == ",":
                break
            if child.type == "type_annotation":
                annotation = child
            elif child.type == "=":
                expect_value = True
            elif (
                expect_value
                and child.is_named
                and child.type not in TRIVIA_NODE_TYPES
            ):
                initializer = child
                expect_value = False

        if pattern is None:
            return None

        return Binding(
            pattern=self._pattern_text(pattern),
            annotation=self._annotation_text(annotation),
            initializer=self._text(initializer) if initializer is not None else None,
        )

    def _pattern_text(self, pattern: Node) -> str:
        start = pattern.start_byte
        for child in pattern.children:
            if child.type != _BINDING_KEYWORD_TYPE:
                break
            start = child.end_byte
        return self._slice(start, pattern.end_byte)

    def _annotation_text(self, annotation: Node | None) -> str | None:
        if annotation is None:
            return None
        type_node = annotation.child_by_field_name("type")
        if type_node is not None:
            return self._text(type_node)
        return self._text(annotation).removeprefix(":").strip()

    def start_line(self, node: Node) -> int:
        return _code_edge(node, from_end=False).start_point[0] + 1

    def end_line(self, node: Node) -> int:
        return _code_edge(node, from_end=True).end_point[0] + 1


def outline_source(
    source: str | bytes,
    *,
    deep: bool = False,
    infer_types: bool = False,
) -> list[SymbolRecord]:
    """Parse Swift source and return its outline.

    Args:
        source: Swift source text (``str`` is encoded as UTF-8)
        deep: Also descend into function, initializer and deinitializer bodies
        infer_types: Attach lexical type labels to variables

    Returns:
        Top-level SymbolRecord objects in source order.
    """
    source_bytes = source.encode("utf-8") if isinstance(source, str) else source
    tree = parse_swift(source_bytes)
    adapter = TreeSitterSwiftAdapter(source_bytes)
    return extract_outline(
        tree.root_node, adapter, deep=deep, infer_types=infer_types
    )
