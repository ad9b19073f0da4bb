import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from src.domain.entities.check_registration import CheckRegistration
from src.domain.entities.check_result import CheckResult
from src.domain.ports.checker_port import CheckerPort
from src.domain.ports.command_runner_port import CommandOutput, CommandRunnerPort
from src.domain.value_objects.check_enums import CheckStatus, Language
from src.domain.value_objects.check_types import CheckMetadata


@dataclass(eq=False)
class StubChecker(CheckerPort):
    """Checker returning a canned status, optionally slow or broken."""

    stub_id: str
    status: CheckStatus = CheckStatus.PASS
    message: str = ""
    delay_s: float = 0.0
    error: Exception | None = None
    calls: list[Path] = field(default_factory=list)

    @property
    def check_id(self) -> str:
        return self.stub_id

    @property
    def name(self) -> str:
        return f"Stub {self.stub_id}"

    async def run(self, project_path: Path) -> CheckResult:
        self.calls.append(project_path)
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.error is not None:
            raise self.error
        message = self.message or ("" if self.status == CheckStatus.PASS else "stub issue")
        return CheckResult(id=self.stub_id, name=self.name, status=self.status, message=message)


class SpyCommandRunner(CommandRunnerPort):
    """Records every resolve/run call instead of spawning processes."""

    def __init__(
        self,
        output: CommandOutput | None = None,
        resolvable: bool = True,
    ) -> None:
        self.output = output or CommandOutput(exit_code=0, stdout="", stderr="", duration_ms=1)
        self.resolvable = resolvable
        self.resolve_calls: list[str] = []
        self.run_calls: list[tuple[list[str], Path, float]] = []

    def resolve(self, command: str) -> str | None:
        self.resolve_calls.append(command)
        if not self.resolvable:
            return None
        return command if command.startswith("/") else f"/usr/bin/{command}"

    async def run(self, argv: list[str], cwd: Path, timeout_s: float) -> CommandOutput:
        self.run_calls.append((argv, cwd, timeout_s))
        return self.output


@pytest.fixture
def make_registration() -> Callable[..., CheckRegistration]:
    def _create(
        check_id: str,
        status: CheckStatus = CheckStatus.PASS,
        critical: bool = False,
        order: int = 100,
        languages: tuple[Language, ...] = (Language.COMMON,),
        **checker_kwargs: object,
    ) -> CheckRegistration:
        checker = StubChecker(
            stub_id=check_id, status=status, **checker_kwargs  # type: ignore[arg-type]
        )
        return CheckRegistration(
            checker=checker,
            metadata=CheckMetadata(
                id=check_id,
                name=checker.name,
                languages=languages,
                critical=critical,
                order=order,
            ),
        )

    return _create


@pytest.fixture
def make_spy_runner() -> Callable[..., SpyCommandRunner]:
    def _create(
        exit_code: int = 0,
        stdout: str = "",
        stderr: str = "",
        timed_out: bool = False,
        launched: bool = True,
        resolvable: bool = True,
    ) -> SpyCommandRunner:
        return SpyCommandRunner(
            output=CommandOutput(
                exit_code=exit_code,
                stdout=stdout,
                stderr=stderr,
                duration_ms=1,
                timed_out=timed_out,
                launched=launched,
            ),
            resolvable=resolvable,
        )

    return _create


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    (project / "README.md").write_text("# demo\n")
    (project / "LICENSE").write_text("MIT\n")
    return project
