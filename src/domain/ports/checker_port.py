from abc import ABC, abstractmethod
from pathlib import Path

from src.domain.entities.check_result import CheckResult


class CheckerPort(ABC):
    """Port implemented by every check, built-in or external."""

    @property
    @abstractmethod
    def check_id(self) -> str:
        """Stable, unique identifier (e.g. "common:ci")."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable label."""

    @abstractmethod
    async def run(self, project_path: Path) -> CheckResult:
        """Evaluate the project at project_path.

        Problems with the project are reported as WARN/FAIL results.
        Raise only when the check itself cannot work (misconfiguration,
        broken environment); the orchestrator records those as results.
        """
