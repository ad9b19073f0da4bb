from enum import Enum

from pydantic import BaseModel, computed_field


class MaturityLevel(str, Enum):
    POC = "poc"
    DEVELOPMENT = "development"
    MATURE = "mature"
    PRODUCTION_READY = "production_ready"

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]

    @property
    def description(self) -> str:
        return _LEVEL_DESCRIPTIONS[self]


_LEVEL_LABELS = {
    MaturityLevel.POC: "Proof of Concept",
    MaturityLevel.DEVELOPMENT: "Development",
    MaturityLevel.MATURE: "Mature",
    MaturityLevel.PRODUCTION_READY: "Production-Ready",
}

_LEVEL_DESCRIPTIONS = {
    MaturityLevel.POC: "Early stage, focus on core functionality first",
    MaturityLevel.DEVELOPMENT: "Core functionality works, quality improvements needed",
    MaturityLevel.MATURE: "Most checks pass, minor improvements recommended",
    MaturityLevel.PRODUCTION_READY: "All checks pass, ready for production deployment",
}


class MaturityReport(BaseModel, frozen=True):
    score: float
    level: MaturityLevel
    passed: int
    warnings: int
    failed: int
    total: int
    critical_failures: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def gate_passed(self) -> bool:
        """False when any critical check failed, whatever the score."""
        return not self.critical_failures
