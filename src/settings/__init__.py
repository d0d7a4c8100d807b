from settings.config import (
    CONFIG_FILENAME,
    ConfigError,
    OutlineConfig,
    config_root,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "OutlineConfig",
    "config_root",
    "load_config",
]
