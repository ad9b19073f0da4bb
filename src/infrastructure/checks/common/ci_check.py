import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from src.domain.entities.check_result import CheckResult
from src.domain.ports.checker_port import CheckerPort
from src.domain.services.result_builder import ResultBuilder
from src.infrastructure.checks.common._paths import first_existing


def _workflow_files(root: Path) -> list[Path]:
    workflows = root / ".github" / "workflows"
    if not workflows.is_dir():
        return []
    return [p for p in workflows.iterdir() if p.is_file() and p.suffix in (".yml", ".yaml")]


async def _has_github_actions(root: Path) -> bool:
    return bool(await asyncio.to_thread(_workflow_files, root))


def _has_file(*names: str) -> Callable[[Path], Awaitable[bool]]:
    async def detect(root: Path) -> bool:
        return await first_existing(root, names) is not None

    return detect


CI_PROVIDERS: list[tuple[str, Callable[[Path], Awaitable[bool]]]] = [
    ("GitHub Actions", _has_github_actions),
    ("GitLab CI", _has_file(".gitlab-ci.yml")),
    ("Jenkins", _has_file("Jenkinsfile")),
    ("CircleCI", _has_file(".circleci/config.yml")),
    ("Travis CI", _has_file(".travis.yml")),
    ("Azure Pipelines", _has_file("azure-pipelines.yml")),
    ("Bitbucket Pipelines", _has_file("bitbucket-pipelines.yml")),
    ("Drone CI", _has_file(".drone.yml")),
    ("Taskfile", _has_file("Taskfile.yml", "Taskfile.yaml")),
]


@dataclass(frozen=True)
class CICheck(CheckerPort):
    @property
    def check_id(self) -> str:
        return "common:ci"

    @property
    def name(self) -> str:
        return "CI Pipeline"

    async def run(self, project_path: Path) -> CheckResult:
        rb = ResultBuilder(self)
        found = [name for name, detect in CI_PROVIDERS if await detect(project_path)]
        if not found:
            return rb.warn("No CI/CD configuration found")
        return rb.pass_(", ".join(found) + " configured")
