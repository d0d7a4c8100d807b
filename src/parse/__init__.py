"""Parsing utilities for swift-outline."""

from parse.treesitter_swift import (
    TreeSitterSwiftAdapter,
    outline_source,
    parse_swift,
)

__all__ = [
    "TreeSitterSwiftAdapter",
    "outline_source",
    "parse_swift",
]
