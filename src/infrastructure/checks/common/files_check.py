from dataclasses import dataclass
from pathlib import Path

from src.domain.entities.check_result import CheckResult
from src.domain.ports.checker_port import CheckerPort
from src.domain.services.result_builder import ResultBuilder
from src.infrastructure.checks.common._paths import exists


@dataclass(frozen=True)
class FileExistsCheck(CheckerPort):
    required: tuple[str, ...] = ("README.md", "LICENSE")

    @property
    def check_id(self) -> str:
        return "file_exists"

    @property
    def name(self) -> str:
        return "Required Files"

    async def run(self, project_path: Path) -> CheckResult:
        rb = ResultBuilder(self)
        missing = [f for f in self.required if not await exists(project_path, f)]
        if missing:
            return rb.warn("Missing files: " + ", ".join(missing))
        return rb.pass_("All required files present")
