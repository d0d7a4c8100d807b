"""Batch outline extraction over Swift files."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import TYPE_CHECKING

import structlog

from outline.models import FileOutline
from outline.walker import extract_outline
from parse.treesitter_swift import TreeSitterSwiftAdapter, parse_swift

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from outline.models import SymbolRecord

logger = structlog.get_logger()


def outline_file(
    path: Path,
    *,
    deep: bool = False,
    infer_types: bool = False,
) -> list[SymbolRecord] | None:
    """Outline a single Swift file.

    Returns None (after logging a warning) when the file cannot be read or
    parsed, so a caller processing many files can skip it and continue.
    Errors raised while walking a parsed tree are not caught.
    """
    try:
        source_bytes = path.read_bytes()
    except OSError as exc:
        logger.warning("read_failed", path=str(path), error=str(exc))
        return None

    try:
        tree = parse_swift(source_bytes)
    except (ValueError, RuntimeError) as exc:
        logger.warning("parse_failed", path=str(path), error=str(exc))
        return None

    adapter = TreeSitterSwiftAdapter(source_bytes)
    return extract_outline(
        tree.root_node, adapter, deep=deep, infer_types=infer_types
    )


def _outline_one(
    path: Path, *, deep: bool, infer_types: bool
) -> tuple[Path, list[SymbolRecord] | None]:
    return path, outline_file(path, deep=deep, infer_types=infer_types)


def outline_files(
    paths: Sequence[Path],
    *,
    deep: bool = False,
    infer_types: bool = False,
    jobs: int = 1,
) -> list[FileOutline]:
    """Outline many files, skipping the ones that fail.

    Each file is walked independently, so ``jobs > 1`` only changes how fast
    results arrive; they are always returned in the order of ``paths``.
    """
    work = partial(_outline_one, deep=deep, infer_types=infer_types)

    if jobs > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            outcomes = list(pool.map(work, paths))
    else:
        outcomes = [work(path) for path in paths]

    results: list[FileOutline] = []
    for path, symbols in outcomes:
        if symbols is None:
            continue
        results.append(FileOutline(file=str(path), symbols=symbols))

    logger.debug("outline_complete", files=len(paths), outlined=len(results))
    return results


__all__ = ["outline_file", "outline_files"]
