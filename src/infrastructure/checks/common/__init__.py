from src.infrastructure.checks.common.ci_check import CICheck
from src.infrastructure.checks.common.dockerfile_check import DockerfileCheck
from src.infrastructure.checks.common.env_check import EnvCheck
from src.infrastructure.checks.common.files_check import FileExistsCheck
from src.infrastructure.checks.common.license_check import LicenseCheck
from src.infrastructure.checks.common.register import register_common_checks

__all__ = [
    "CICheck",
    "DockerfileCheck",
    "EnvCheck",
    "FileExistsCheck",
    "LicenseCheck",
    "register_common_checks",
]
