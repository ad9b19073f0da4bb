from dataclasses import dataclass
from pathlib import Path

from src.domain.entities.check_result import CheckResult
from src.domain.ports.checker_port import CheckerPort
from src.domain.services.result_builder import ResultBuilder
from src.infrastructure.checks.common._paths import exists, first_existing

DOCKERFILE_NAMES = ("Dockerfile", "dockerfile", "Containerfile", "containerfile")


@dataclass(frozen=True)
class DockerfileCheck(CheckerPort):
    @property
    def check_id(self) -> str:
        return "common:dockerfile"

    @property
    def name(self) -> str:
        return "Container Ready"

    async def run(self, project_path: Path) -> CheckResult:
        rb = ResultBuilder(self)
        dockerfile = await first_existing(project_path, DOCKERFILE_NAMES)
        if dockerfile is None:
            return rb.warn("No Dockerfile or Containerfile found")
        if await exists(project_path, ".dockerignore"):
            return rb.pass_(f"{dockerfile} found (with .dockerignore)")
        return rb.pass_(f"{dockerfile} found")
