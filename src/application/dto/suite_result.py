from pydantic import BaseModel, Field

from src.domain.entities.check_result import CheckResult
from src.domain.value_objects.check_enums import CheckStatus


class RunOptions(BaseModel):
    parallel: bool = True
    workers: int | None = Field(default=None, ge=1)  # None: one per CPU
    check_timeout_s: float = Field(default=120.0, gt=0)
    fail_fast: bool = False


class SuiteResult(BaseModel):
    """Results of one orchestrated run, in registration order."""

    results: list[CheckResult] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    cancelled: bool = False
    duration_ms: int = 0

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.status == CheckStatus.PASS)

    @property
    def warnings(self) -> int:
        return sum(1 for r in self.results if r.status == CheckStatus.WARN)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.status == CheckStatus.FAIL)
