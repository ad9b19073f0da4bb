from dataclasses import dataclass
from pathlib import Path

from src.domain.entities.check_result import CheckResult
from src.domain.ports.checker_port import CheckerPort
from src.domain.services.result_builder import ResultBuilder
from src.infrastructure.checks.common._paths import exists, read_text

ENV_TEMPLATES = (
    ".env.example",
    ".env.sample",
    ".env.template",
    "example.env",
    ".env.local.example",
)


async def _env_ignored(root: Path) -> bool:
    gitignore = await read_text(root, ".gitignore")
    if gitignore is None:
        return False
    entries = {line.strip() for line in gitignore.splitlines()}
    return bool(entries & {".env", "/.env", ".env*", "*.env"})


@dataclass(frozen=True)
class EnvCheck(CheckerPort):
    @property
    def check_id(self) -> str:
        return "common:env"

    @property
    def name(self) -> str:
        return "Environment Config"

    async def run(self, project_path: Path) -> CheckResult:
        rb = ResultBuilder(self)
        templates = [t for t in ENV_TEMPLATES if await exists(project_path, t)]
        ignored = await _env_ignored(project_path)

        if await exists(project_path, ".env") and not ignored:
            return rb.warn(".env file exists but is not in .gitignore")

        if not templates:
            return rb.warn(
                "No environment configuration found (add .env.example to document required vars)"
            )

        findings = templates + ([".env in .gitignore"] if ignored else [])
        return rb.pass_("Environment config: " + ", ".join(findings))
