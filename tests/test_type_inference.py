from __future__ import annotations

import pytest

from outline.models import Binding
from outline.type_inference import (
    ARRAY_TYPE,
    BOOL_TYPE,
    DICTIONARY_TYPE,
    DOUBLE_TYPE,
    INT_TYPE,
    STRING_TYPE,
    infer_binding_type,
    infer_type,
)


def test_annotation_wins_over_constructor() -> None:
    assert infer_type("Foo", "Bar()") == "Foo"


def test_annotation_is_trimmed_verbatim() -> None:
    assert infer_type("  [String: Int]? ", None) == "[String: Int]?"


def test_blank_annotation_falls_back_to_initializer() -> None:
    assert infer_type("   ", "Baz()") == "Baz"


@pytest.mark.parametrize(
    ("initializer", "expected"),
    [
        ("Baz()", "Baz"),
        ("UInt64(100)", "UInt64"),
        (
            "UICollectionView(frame: .zero, collectionViewLayout: Layout())",
            "UICollectionView",
        ),
        ("Foo.Bar(x: 1)", "Foo.Bar"),
        # Indistinguishable from a constructor call; labelled anyway.
        ("makeWidget()", "makeWidget"),
        ("  Spaced ()  ", "Spaced"),
    ],
)
def test_call_expression_uses_callee_text(initializer: str, expected: str) -> None:
    assert infer_type(None, initializer) == expected


@pytest.mark.parametrize(
    ("initializer", "expected"),
    [
        ('"test"', STRING_TYPE),
        ('""', STRING_TYPE),
        ("true", BOOL_TYPE),
        ("false", BOOL_TYPE),
        ("42", INT_TYPE),
        ("-7", INT_TYPE),
        ("1.5", DOUBLE_TYPE),
        ("3.14", DOUBLE_TYPE),
        ("2.5e3", DOUBLE_TYPE),
        ("[1,2,3]", ARRAY_TYPE),
        ("[]", ARRAY_TYPE),
        ('["k":"v"]', DICTIONARY_TYPE),
        ("[:]", DICTIONARY_TYPE),
        ('[["a": 1], ["b": 2]]', ARRAY_TYPE),
        ('["a": [1, 2]]', DICTIONARY_TYPE),
        ('["a:b", "c"]', ARRAY_TYPE),
    ],
)
def test_literal_forms(initializer: str, expected: str) -> None:
    assert infer_type(None, initializer) == expected


def test_float_literal_is_not_member_access() -> None:
    assert infer_type(None, "1.5") == DOUBLE_TYPE


@pytest.mark.parametrize(
    ("initializer", "expected"),
    [
        ("Color.red", "Color"),
        ("UIColor.systemBackground.cgColor", "UIColor"),
        ("Self.shared", "Self"),
    ],
)
def test_member_access_uses_prefix(initializer: str, expected: str) -> None:
    assert infer_type(None, initializer) == expected


@pytest.mark.parametrize(
    ("annotation", "initializer"),
    [
        (None, None),
        (None, ""),
        (None, "   "),
        (None, "someValue"),
        (None, ".zero"),
        (None, "(1, 2)"),
        (None, "(1.5, 2)"),
        (None, "(a.b)"),
        (None, "([1, 2])"),
        (None, "1_000"),
        (None, "nil"),
        (None, "{ $0 + 1 }"),
    ],
)
def test_unmatched_expressions_have_no_type(
    annotation: str | None, initializer: str | None
) -> None:
    assert infer_type(annotation, initializer) is None


def test_empty_callee_decides_without_member_access() -> None:
    assert infer_type(None, "(value).count") is None


def test_binding_helper() -> None:
    assert infer_binding_type(None) is None
    assert infer_binding_type(Binding(pattern="x")) is None
    assert infer_binding_type(Binding(pattern="x", initializer="true")) == BOOL_TYPE
    assert (
        infer_binding_type(Binding(pattern="x", annotation="Int", initializer="1.5"))
        == "Int"
    )
