from pathlib import Path

import typer
from rich.console import Console

from src.application.services.check_registry import RegistryError
from src.cli.commands.check import EXIT_CONFIG_ERROR, resolve_languages
from src.cli.formatters.report_formatter import format_registrations
from src.cli.theme import theme
from src.infrastructure.checks.registry_factory import create_check_registry
from src.infrastructure.config.yaml_config_loader import ConfigError, YamlConfigLoader

console = Console()


def list_checks(
    path: Path = typer.Argument(Path("."), help="Project directory"),
) -> None:
    """List the checks that would run for a project, in execution order."""
    project_path = path.resolve()

    try:
        config = YamlConfigLoader().load(project_path)
        registrations = create_check_registry().build(
            config, resolve_languages(project_path, config)
        )
    except (ConfigError, RegistryError) as e:
        console.print(f"[{theme.ERROR_BOLD}]Error:[/] {e}")
        raise typer.Exit(EXIT_CONFIG_ERROR) from e

    if not registrations:
        console.print(f"[{theme.WARNING}]No checks registered.[/]")
        return

    format_registrations(console, registrations)
