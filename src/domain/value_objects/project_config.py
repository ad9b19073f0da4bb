from pydantic import BaseModel, Field

from src.domain.value_objects.check_enums import Language
from src.domain.value_objects.check_types import ExternalCheckSpec


class FilesConfig(BaseModel):
    required: list[str] = Field(default_factory=lambda: ["README.md", "LICENSE"])


class ChecksConfig(BaseModel):
    # Check ids or wildcard patterns ("*:license", "common:*"); quote them in YAML.
    disabled: list[str] = Field(default_factory=list)


class ExecutionConfig(BaseModel):
    parallel: bool = True
    fail_fast: bool = False
    timeout_s: float = Field(default=120.0, gt=0)
    workers: int | None = Field(default=None, ge=1)


class LanguageConfig(BaseModel):
    explicit: list[Language] = Field(default_factory=list)
    auto_detect: bool = True


class ProjectConfig(BaseModel):
    """Contents of a project's .maturity.yaml."""

    files: FilesConfig = Field(default_factory=FilesConfig)
    checks: ChecksConfig = Field(default_factory=ChecksConfig)
    external: list[ExternalCheckSpec] = Field(default_factory=list)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    language: LanguageConfig = Field(default_factory=LanguageConfig)
