from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from structlog.testing import capture_logs

from outline import extract
from outline.extract import outline_file, outline_files

if TYPE_CHECKING:
    from pathlib import Path


def _write_swift(root: Path, relative_path: str, source: str) -> Path:
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


def test_outline_file_reads_and_walks(tmp_path: Path) -> None:
    path = _write_swift(tmp_path, "A.swift", "struct A {\n    var x = 1\n}\n")

    symbols = outline_file(path, infer_types=True)

    assert symbols is not None
    assert [(s.kind, s.name) for s in symbols] == [("struct", "A")]
    assert symbols[0].members[0].type == "Int"


def test_unreadable_file_is_reported_and_skipped(tmp_path: Path) -> None:
    good = _write_swift(tmp_path, "Good.swift", "class Good {}\n")
    missing = tmp_path / "Missing.swift"

    with capture_logs() as logs:
        results = outline_files([missing, good])

    assert [r.file for r in results] == [str(good)]
    assert [s.name for s in results[0].symbols] == ["Good"]
    warnings = [entry for entry in logs if entry["log_level"] == "warning"]
    assert len(warnings) == 1
    assert warnings[0]["event"] == "read_failed"
    assert warnings[0]["path"] == str(missing)


def test_outline_file_returns_none_for_directory(tmp_path: Path) -> None:
    with capture_logs() as logs:
        assert outline_file(tmp_path) is None

    assert logs[0]["event"] == "read_failed"


def test_parallel_results_keep_input_order(tmp_path: Path) -> None:
    paths = [
        _write_swift(tmp_path, f"File{i}.swift", f"enum E{i} {{}}\nfunc f{i}() {{}}\n")
        for i in range(8)
    ]

    sequential = outline_files(paths, jobs=1)
    parallel = outline_files(paths, jobs=4)

    assert [r.file for r in parallel] == [str(p) for p in paths]
    assert [r.model_dump() for r in parallel] == [r.model_dump() for r in sequential]


def test_deep_flag_is_forwarded(tmp_path: Path) -> None:
    path = _write_swift(
        tmp_path,
        "Deep.swift",
        "func outer() {\n    let local = 1\n    func inner() {}\n}\n",
    )

    shallow = outline_files([path])[0].symbols
    deep = outline_files([path], deep=True)[0].symbols

    assert shallow[0].members == []
    assert [m.name for m in deep[0].members] == ["inner"]


def test_parser_error_is_reported_and_skipped(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = _write_swift(tmp_path, "Broken.swift", "struct Broken {}\n")

    def fail_parse(source: bytes) -> None:
        raise RuntimeError("grammar unavailable")

    monkeypatch.setattr(extract, "parse_swift", fail_parse)

    with capture_logs() as logs:
        assert outline_file(path) is None

    assert logs[0]["event"] == "parse_failed"
    assert logs[0]["error"] == "grammar unavailable"


def test_walker_errors_are_not_reported_as_parse_failures(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = _write_swift(tmp_path, "Walk.swift", "struct Walk {}\n")

    def fail_walk(*args: object, **kwargs: object) -> None:
        raise ValueError("endLine precedes startLine")

    monkeypatch.setattr(extract, "extract_outline", fail_walk)

    with capture_logs() as logs, pytest.raises(ValueError, match="endLine"):
        outline_file(path)

    assert logs == []
