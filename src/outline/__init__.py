"""Hierarchical symbol outlines for Swift syntax trees."""

from outline.models import Binding, FileOutline, SymbolKind, SymbolRecord
from outline.scope import ScopeStack
from outline.type_inference import infer_binding_type, infer_type
from outline.walker import OutlineWalker, extract_outline

__all__ = [
    "Binding",
    "FileOutline",
    "OutlineWalker",
    "ScopeStack",
    "SymbolKind",
    "SymbolRecord",
    "extract_outline",
    "infer_binding_type",
    "infer_type",
]
