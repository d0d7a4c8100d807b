"""Lexical type labels for variable bindings.

The rules here read the annotation or initializer as plain text. They are a
best-effort outline aid, not a type checker: ``let x = makeThing()`` is
labelled ``makeThing`` because a function call and a constructor call look
the same.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from outline.models import Binding

STRING_TYPE = "String"
BOOL_TYPE = "Bool"
INT_TYPE = "Int"
DOUBLE_TYPE = "Double"
ARRAY_TYPE = "Array"
DICTIONARY_TYPE = "Dictionary"

_INT_LITERAL = re.compile(r"[+-]?\d+")
_FLOAT_LITERAL = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?")

_OPENERS = "([{"
_CLOSERS = ")]}"


def _prefix_before(text: str, marker: str) -> str | None:
    """Return the trimmed text before the first ``marker``, if non-empty."""
    prefix = text.split(marker, 1)[0].strip()
    return prefix or None


def _is_string_literal(text: str) -> bool:
    return len(text) >= 2 and text.startswith('"') and text.endswith('"')


def _has_top_level_colon(inner: str) -> bool:
    """Check for a ``:`` outside nested brackets and string literals."""
    depth = 0
    in_string = False
    escaped = False
    for char in inner:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == ":" and depth == 0:
            return True
    return False


def _literal_type(text: str) -> str | None:
    """Match the literal forms in priority order."""
    if _is_string_literal(text):
        return STRING_TYPE
    if text in ("true", "false"):
        return BOOL_TYPE
    if "." not in text:
        if _INT_LITERAL.fullmatch(text):
            return INT_TYPE
    elif _FLOAT_LITERAL.fullmatch(text):
        return DOUBLE_TYPE
    if len(text) >= 2 and text.startswith("[") and text.endswith("]"):
        if _has_top_level_colon(text[1:-1]):
            return DICTIONARY_TYPE
        return ARRAY_TYPE
    return None


def infer_type(annotation: str | None, initializer: str | None) -> str | None:
    """Infer a type label from an annotation or initializer expression.

    First applicable rule wins:

    1. an explicit annotation, verbatim;
    2. an initializer containing ``(``: the text before the first ``(``;
    3. a literal (string, boolean, integer, floating point, collection);
    4. an initializer containing ``.``: the text before the first ``.``.

    Once an initializer contains ``(`` the call rule decides alone: an empty
    prefix, as in ``(1, 2)``, yields no type. Literals are tried before the
    ``.`` rule so ``1.5`` reads as a number rather than member access.
    Returns None when nothing matches.
    """
    if annotation is not None:
        annotated = annotation.strip()
        if annotated:
            return annotated

    if initializer is None:
        return None
    text = initializer.strip()
    if not text:
        return None

    if "(" in text:
        return _prefix_before(text, "(")

    literal = _literal_type(text)
    if literal is not None:
        return literal

    if "." in text:
        return _prefix_before(text, ".")

    return None


def infer_binding_type(binding: Binding | None) -> str | None:
    """Infer the type label for the first binding of a variable declaration."""
    if binding is None:
        return None
    return infer_type(binding.annotation, binding.initializer)


__all__ = [
    "ARRAY_TYPE",
    "BOOL_TYPE",
    "DICTIONARY_TYPE",
    "DOUBLE_TYPE",
    "INT_TYPE",
    "STRING_TYPE",
    "infer_binding_type",
    "infer_type",
]
