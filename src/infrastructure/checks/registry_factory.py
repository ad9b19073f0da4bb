from functools import partial

from src.application.services.check_registry import CheckRegistry
from src.domain.ports.command_runner_port import CommandRunnerPort
from src.infrastructure.checks.common import register_common_checks
from src.infrastructure.checks.external_check import ExternalCheck
from src.infrastructure.checks.subprocess_command_runner import SubprocessCommandRunner


def create_check_registry(command_runner: CommandRunnerPort | None = None) -> CheckRegistry:
    """Registry with the built-in checks and subprocess-backed external checks."""
    runner = command_runner or SubprocessCommandRunner()
    return CheckRegistry(
        builtin_factory=register_common_checks,
        external_factory=partial(ExternalCheck, runner=runner),
    )
