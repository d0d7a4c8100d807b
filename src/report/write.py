"""JSON rendering of outline results."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import orjson

if TYPE_CHECKING:
    from collections.abc import Sequence

    from outline.models import FileOutline, SymbolRecord

_JSON_OPTIONS = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2


def _symbol_payload(symbol: SymbolRecord) -> dict[str, Any]:
    return symbol.model_dump(by_alias=True, exclude_none=True)


def outline_payload(results: Sequence[FileOutline]) -> list[dict[str, Any]]:
    """Build the JSON-ready payload for a run.

    A single input renders as its bare symbol list; several inputs render as
    ``{"file": ..., "symbols": [...]}`` objects in input order.
    """
    if len(results) == 1:
        return [_symbol_payload(symbol) for symbol in results[0].symbols]
    return [
        {
            "file": result.file,
            "symbols": [_symbol_payload(symbol) for symbol in result.symbols],
        }
        for result in results
    ]


def render_outline(results: Sequence[FileOutline]) -> bytes:
    return orjson.dumps(outline_payload(results), option=_JSON_OPTIONS)


def write_outline(results: Sequence[FileOutline], stream: IO[str]) -> None:
    stream.write(render_outline(results).decode("utf-8"))
    stream.write("\n")


__all__ = ["outline_payload", "render_outline", "write_outline"]
