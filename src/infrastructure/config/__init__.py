from src.infrastructure.config.yaml_config_loader import (
    CONFIG_FILENAME,
    ConfigError,
    YamlConfigLoader,
)

__all__ = ["CONFIG_FILENAME", "ConfigError", "YamlConfigLoader"]
