from __future__ import annotations

from pathlib import Path
from typing import Literal

import tomllib
from pydantic import BaseModel, ConfigDict, Field

CONFIG_FILENAME = "swift-outline.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class OutlineConfig(BaseModel):
    """Configuration for swift-outline runs."""

    model_config = ConfigDict(extra="forbid")

    deep: bool = Field(
        default=False,
        description="Descend into function, init and deinit bodies",
    )
    show_type: bool = Field(
        default=False,
        description="Attach inferred type labels to variables",
    )
    recursive: bool = Field(
        default=False,
        description="Scan directories recursively",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all Swift files)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    nested_gitignore: bool = Field(
        default=False,
        description=(
            "Enable nested .gitignore composition (default: false for root-only)"
        ),
    )
    jobs: int = Field(
        default=1,
        ge=1,
        description="Number of files outlined in parallel",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Minimum level for diagnostics written to stderr",
    )


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def config_root(path: Path) -> Path:
    """Directory searched for the config file when outlining ``path``."""
    return path if path.is_dir() else path.parent


def load_config(root: Path) -> OutlineConfig:
    """Load configuration from swift-outline.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return OutlineConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return OutlineConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
