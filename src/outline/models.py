"""Symbol models for Swift outlines.

This module contains the records produced by an outline walk: one
``SymbolRecord`` per collected declaration, nested through ``members``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

SymbolKind = Literal[
    "class",
    "struct",
    "actor",
    "enum",
    "protocol",
    "extension",
    "func",
    "init",
    "deinit",
    "var",
]

# Always containers, in either traversal policy.
TYPE_KINDS: frozenset[SymbolKind] = frozenset(
    {"class", "struct", "actor", "enum", "protocol", "extension"}
)

# Executable bodies: leaves when shallow, containers when deep.
BODY_KINDS: frozenset[SymbolKind] = frozenset({"func", "init", "deinit"})

UNKNOWN_NAME = "(unknown)"


class SymbolRecord(BaseModel):
    """A declaration extracted from a Swift source file."""

    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    kind: SymbolKind
    name: str
    start_line: int = Field(alias="startLine", ge=1)
    end_line: int = Field(alias="endLine", ge=1)
    members: list[SymbolRecord] = Field(default_factory=list)
    type: str | None = Field(
        default=None, description="Inferred type label (variables only)"
    )

    @model_validator(mode="after")
    def check_span(self) -> SymbolRecord:
        if self.start_line > self.end_line:
            msg = f"start_line {self.start_line} is after end_line {self.end_line}"
            raise ValueError(msg)
        return self


class FileOutline(BaseModel):
    """Outline of one input file in a batch."""

    file: str
    symbols: list[SymbolRecord] = Field(default_factory=list)


@dataclass(frozen=True)
class Binding:
    """First binding of a variable declaration, as trimmed source text."""

    pattern: str
    annotation: str | None = None
    initializer: str | None = None


__all__ = [
    "BODY_KINDS",
    "TYPE_KINDS",
    "UNKNOWN_NAME",
    "Binding",
    "FileOutline",
    "SymbolKind",
    "SymbolRecord",
]
