from src.domain.ports.checker_port import CheckerPort
from src.domain.ports.command_runner_port import CommandOutput, CommandRunnerPort

__all__ = [
    "CheckerPort",
    "CommandOutput",
    "CommandRunnerPort",
]
