from __future__ import annotations

from pathlib import Path

import pytest

from settings.config import ConfigError, OutlineConfig, config_root, load_config


def _write_config(root: Path, toml_content: str) -> None:
    (root / "swift-outline.toml").write_text(toml_content, encoding="utf-8")


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == OutlineConfig()
    assert config.deep is False
    assert config.jobs == 1
    assert config.log_level == "WARNING"


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
deep = true
show_type = true
recursive = true
jobs = 4
exclude = ["Tests/**"]
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.deep is True
    assert config.show_type is True
    assert config.recursive is True
    assert config.jobs == 4
    assert config.exclude == ["Tests/**"]


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "deep = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "toml_content",
    ["jobs = 0", 'log_level = "LOUD"', 'include = "Sources/*"'],
)
def test_invalid_values_rejected(tmp_path: Path, toml_content: str) -> None:
    _write_config(tmp_path, toml_content)

    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(tmp_path)


def test_config_root_for_file_is_parent(tmp_path: Path) -> None:
    source = tmp_path / "Main.swift"
    source.write_text("", encoding="utf-8")

    assert config_root(source) == tmp_path
    assert config_root(tmp_path) == tmp_path
