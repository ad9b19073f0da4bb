from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel


class CommandOutput(BaseModel):
    """Captured outcome of a process invocation."""

    exit_code: int
    stdout: str
    stderr: str
    duration_ms: int
    timed_out: bool = False
    launched: bool = True


class CommandRunnerPort(ABC):
    """Port for spawning external processes."""

    @abstractmethod
    def resolve(self, command: str) -> str | None:
        """Return the absolute path of an executable, or None if not found."""

    @abstractmethod
    async def run(
        self,
        argv: list[str],
        cwd: Path,
        timeout_s: float,
    ) -> CommandOutput:
        """Run argv directly (no shell) in cwd, killed after timeout_s."""
