from src.domain.value_objects.check_enums import CheckStatus, Language, Severity
from src.domain.value_objects.check_types import (
    CheckMetadata,
    ExternalCheckSpec,
    ExternalOutput,
)
from src.domain.value_objects.maturity import MaturityLevel, MaturityReport
from src.domain.value_objects.project_config import (
    ChecksConfig,
    ExecutionConfig,
    FilesConfig,
    LanguageConfig,
    ProjectConfig,
)

__all__ = [
    "CheckMetadata",
    "CheckStatus",
    "ChecksConfig",
    "ExecutionConfig",
    "ExternalCheckSpec",
    "ExternalOutput",
    "FilesConfig",
    "Language",
    "LanguageConfig",
    "MaturityLevel",
    "MaturityReport",
    "ProjectConfig",
    "Severity",
]
