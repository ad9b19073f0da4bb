from src.infrastructure.checks.external_check import (
    ExternalCheck,
    InvalidCommandError,
    validate_command,
)
from src.infrastructure.checks.registry_factory import create_check_registry
from src.infrastructure.checks.subprocess_command_runner import SubprocessCommandRunner

__all__ = [
    "ExternalCheck",
    "InvalidCommandError",
    "SubprocessCommandRunner",
    "create_check_registry",
    "validate_command",
]
