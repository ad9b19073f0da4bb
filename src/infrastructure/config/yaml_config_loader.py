from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.domain.value_objects.project_config import ProjectConfig

CONFIG_FILENAME = ".maturity.yaml"


class ConfigError(Exception):
    """Configuration loading or validation error."""


class YamlConfigLoader:
    """Loads a project's .maturity.yaml, falling back to defaults."""

    def __init__(self, filename: str = CONFIG_FILENAME) -> None:
        self.filename = filename

    def load(self, project_path: Path) -> ProjectConfig:
        config_file = project_path / self.filename
        if not config_file.is_file():
            logger.debug("No {} in {}, using defaults", self.filename, project_path)
            return ProjectConfig()

        try:
            raw = config_file.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_file}: {e}") from e

        return self.parse(raw, source=str(config_file))

    def parse(self, raw: str, source: str = CONFIG_FILENAME) -> ProjectConfig:
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            hint = ""
            if "alias" in str(e) or "alphabetic or numeric" in str(e):
                hint = ' (wildcard patterns in checks.disabled must be quoted, e.g. "*:license")'
            raise ConfigError(f"Invalid YAML in {source}: {e}{hint}") from e

        if data is None:
            return ProjectConfig()
        if not isinstance(data, dict):
            raise ConfigError(f"{source} must contain a mapping at top level")

        try:
            config = ProjectConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e

        logger.debug(
            "Loaded {}: {} external check(s), {} disabled pattern(s)",
            source,
            len(config.external),
            len(config.checks.disabled),
        )
        return config
