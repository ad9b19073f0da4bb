"""Project-declared commands run as checks.

A command integrates through one of two channels:

- Exit code: 0 pass, 1 warn, 2 or more fail. Plain-text output becomes
  the message.
- JSON on stdout (or stderr when stdout is empty):
  {"message": "...", "status": "pass|warn|warning|fail|error"}.
  A parsed payload takes priority over the exit code.

The command is resolved to an absolute path and spawned directly with an
argument vector, so arguments are never shell-interpreted.
"""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from src.domain.entities.check_result import CheckResult
from src.domain.ports.checker_port import CheckerPort
from src.domain.ports.command_runner_port import CommandOutput, CommandRunnerPort
from src.domain.services.result_builder import ResultBuilder
from src.domain.value_objects.check_enums import Severity
from src.domain.value_objects.check_types import ExternalCheckSpec, ExternalOutput

SHELL_METACHARACTERS = frozenset(";&|$`(){}<>\n\r")
# A command name holding whitespace is a command line, not an executable
WHITESPACE = frozenset(" \t\v\f")
PATH_SEPARATORS = ("/", "\\")

DEFAULT_FAILURE_MESSAGE = "Check failed"


class InvalidCommandError(ValueError):
    """Raised when an external command fails validation."""


def validate_command(command: str) -> None:
    """Reject commands that could escape into a shell or the filesystem."""
    if not command.strip():
        raise InvalidCommandError("empty command")

    if any(ch in SHELL_METACHARACTERS or ch in WHITESPACE for ch in command):
        raise InvalidCommandError(f"invalid characters in command: {command!r}")

    if any(sep in command for sep in PATH_SEPARATORS) and not Path(command).is_absolute():
        raise InvalidCommandError(f"relative paths not allowed: {command}")


@dataclass(frozen=True)
class ExternalCheck(CheckerPort):
    spec: ExternalCheckSpec
    runner: CommandRunnerPort

    @property
    def check_id(self) -> str:
        return self.spec.id

    @property
    def name(self) -> str:
        return self.spec.name

    async def run(self, project_path: Path) -> CheckResult:
        rb = ResultBuilder(self)

        try:
            validate_command(self.spec.command)
            work_dir = self._work_dir(project_path)
        except InvalidCommandError as e:
            logger.warning("External check '{}' rejected: {}", self.spec.id, e)
            return rb.warn(str(e))

        resolved = self.runner.resolve(self.spec.command)
        if resolved is None:
            logger.warning(
                "External check '{}': command '{}' not found",
                self.spec.id,
                self.spec.command,
            )
            return rb.warn(f"Command not found: {self.spec.command}")

        output = await self.runner.run(
            [resolved, *self.spec.args],
            cwd=work_dir,
            timeout_s=self.spec.timeout_s,
        )
        return self._interpret(output, rb)

    def _work_dir(self, project_path: Path) -> Path:
        if not self.spec.source_dir:
            return project_path

        root = project_path.resolve()
        work_dir = (root / self.spec.source_dir).resolve()
        if not work_dir.is_relative_to(root):
            raise InvalidCommandError(f"source_dir escapes project: {self.spec.source_dir}")
        return work_dir

    def _interpret(self, output: CommandOutput, rb: ResultBuilder) -> CheckResult:
        if output.timed_out:
            message = f"Command timed out after {self.spec.timeout_s:g}s"
            if self.spec.severity == Severity.FAIL:
                return rb.fail(message)
            return rb.warn(message)

        text = output.stdout.strip() or output.stderr.strip()

        payload = _parse_json_output(text)
        if payload is not None:
            return _result_from_json(payload, rb)

        return self._result_from_exit_code(text, output, rb)

    def _result_from_exit_code(
        self,
        text: str,
        output: CommandOutput,
        rb: ResultBuilder,
    ) -> CheckResult:
        if output.launched and output.exit_code == 0:
            return rb.pass_(text)

        # Spawn failures carry no exit status and count as an exit code of 1
        exit_code = output.exit_code if output.launched else 1
        message = text or DEFAULT_FAILURE_MESSAGE

        if exit_code >= 2 or exit_code < 0 or self.spec.severity == Severity.FAIL:
            return rb.fail(message)
        return rb.warn(message)


def _parse_json_output(text: str) -> ExternalOutput | None:
    if not text:
        return None
    # A bare JSON null carries no fields and reads as an empty payload
    if text == "null":
        return ExternalOutput()
    try:
        return ExternalOutput.model_validate_json(text)
    except ValidationError:
        return None


def _result_from_json(payload: ExternalOutput, rb: ResultBuilder) -> CheckResult:
    status = payload.status.strip().lower()
    message = payload.message

    if status in ("warn", "warning"):
        return rb.warn(message or DEFAULT_FAILURE_MESSAGE)
    if status in ("fail", "error"):
        return rb.fail(message or DEFAULT_FAILURE_MESSAGE)
    return rb.pass_(message)
