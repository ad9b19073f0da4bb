from src.domain.entities.check_registration import CheckRegistration
from src.domain.value_objects.check_enums import Language
from src.domain.value_objects.check_types import CheckMetadata
from src.domain.value_objects.project_config import ProjectConfig
from src.infrastructure.checks.common.ci_check import CICheck
from src.infrastructure.checks.common.dockerfile_check import DockerfileCheck
from src.infrastructure.checks.common.env_check import EnvCheck
from src.infrastructure.checks.common.files_check import FileExistsCheck
from src.infrastructure.checks.common.license_check import LicenseCheck


def register_common_checks(config: ProjectConfig) -> list[CheckRegistration]:
    """Language-agnostic built-in checks.

    Orders put cheap structural checks (files, container, CI) first.
    """
    common = (Language.COMMON,)
    return [
        CheckRegistration(
            checker=FileExistsCheck(required=tuple(config.files.required)),
            metadata=CheckMetadata(
                id="file_exists",
                name="Required Files",
                languages=common,
                order=900,
                description="Checks for required documentation files like README.md.",
                suggestion="Add missing documentation files (README.md, etc.)",
            ),
        ),
        CheckRegistration(
            checker=DockerfileCheck(),
            metadata=CheckMetadata(
                id="common:dockerfile",
                name="Container Ready",
                languages=common,
                order=910,
                description="Verifies a Dockerfile or Containerfile exists.",
                suggestion="Add Dockerfile for containerization",
            ),
        ),
        CheckRegistration(
            checker=CICheck(),
            metadata=CheckMetadata(
                id="common:ci",
                name="CI Pipeline",
                languages=common,
                order=920,
                description=(
                    "Checks for CI/CD pipeline configuration (GitHub Actions, GitLab CI, etc.)."
                ),
                suggestion="Add CI pipeline configuration (.github/workflows, etc.)",
            ),
        ),
        CheckRegistration(
            checker=EnvCheck(),
            metadata=CheckMetadata(
                id="common:env",
                name="Environment Config",
                languages=common,
                order=945,
                description="Checks for a .env.example documenting required environment variables.",
                suggestion="Add .env.example for environment configuration",
            ),
        ),
        CheckRegistration(
            checker=LicenseCheck(),
            metadata=CheckMetadata(
                id="common:license",
                name="License Compliance",
                languages=common,
                order=950,
                description="Verifies a LICENSE file exists.",
                suggestion="Add LICENSE file for license compliance",
            ),
        ),
    ]
