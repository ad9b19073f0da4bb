from dataclasses import dataclass
from pathlib import Path

from src.domain.entities.check_result import CheckResult
from src.domain.ports.checker_port import CheckerPort
from src.domain.services.result_builder import ResultBuilder
from src.infrastructure.checks.common._paths import first_existing

LICENSE_NAMES = ("LICENSE", "LICENSE.md", "LICENSE.txt", "LICENCE", "COPYING")


@dataclass(frozen=True)
class LicenseCheck(CheckerPort):
    @property
    def check_id(self) -> str:
        return "common:license"

    @property
    def name(self) -> str:
        return "License Compliance"

    async def run(self, project_path: Path) -> CheckResult:
        rb = ResultBuilder(self)
        found = await first_existing(project_path, LICENSE_NAMES)
        if found is None:
            return rb.warn("No LICENSE file found")
        return rb.pass_(f"{found} found")
