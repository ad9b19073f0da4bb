import asyncio
import contextlib
import signal
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from src.application.dto.evaluation_report import EvaluationReport
from src.application.dto.suite_result import RunOptions
from src.application.orchestrator import CheckOrchestrator
from src.application.services.check_registry import RegistryError
from src.application.use_cases.evaluate_project import EvaluateProject
from src.cli.formatters.progress_formatter import check_progress
from src.cli.formatters.report_formatter import format_report
from src.cli.theme import theme
from src.domain.value_objects.check_enums import Language
from src.domain.value_objects.project_config import ProjectConfig
from src.infrastructure.checks.registry_factory import create_check_registry
from src.infrastructure.config.yaml_config_loader import ConfigError, YamlConfigLoader
from src.infrastructure.verification.language_detector import LanguageDetector

console = Console()

EXIT_GATE_FAILED = 1
EXIT_CONFIG_ERROR = 2


def check_project(
    path: Path = typer.Argument(Path("."), help="Project directory to evaluate"),
    sequential: bool = typer.Option(False, "--sequential", help="Run checks one at a time"),
    fail_fast: bool = typer.Option(
        False, "--fail-fast", help="Skip remaining checks after a critical failure"
    ),
    timeout: float | None = typer.Option(None, "--timeout", help="Per-check timeout in seconds"),
    skip: list[str] = typer.Option(
        [], "--skip", "-s", help="Check id or pattern to skip (repeatable)"
    ),
    output_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Run all checks against a project and report its maturity."""
    project_path = path.resolve()
    if not project_path.is_dir():
        console.print(f"[{theme.ERROR_BOLD}]Not a directory:[/] {path}")
        raise typer.Exit(EXIT_CONFIG_ERROR)

    try:
        config = YamlConfigLoader().load(project_path)
    except ConfigError as e:
        console.print(f"[{theme.ERROR_BOLD}]Configuration error:[/] {e}")
        raise typer.Exit(EXIT_CONFIG_ERROR) from e

    config = apply_overrides(
        config,
        sequential=sequential,
        fail_fast=fail_fast,
        timeout=timeout,
        skip=skip,
    )

    try:
        report = asyncio.run(run_evaluation(project_path, config, show_progress=not output_json))
    except RegistryError as e:
        console.print(f"[{theme.ERROR_BOLD}]Invalid check registry:[/] {e}")
        raise typer.Exit(EXIT_CONFIG_ERROR) from e

    if output_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        format_report(console, report)

    if report.cancelled or not report.maturity.gate_passed:
        raise typer.Exit(EXIT_GATE_FAILED)


def apply_overrides(
    config: ProjectConfig,
    sequential: bool = False,
    fail_fast: bool = False,
    timeout: float | None = None,
    skip: list[str] | None = None,
) -> ProjectConfig:
    """Fold command-line flags into the loaded configuration."""
    execution = config.execution.model_copy(
        update={
            "parallel": config.execution.parallel and not sequential,
            "fail_fast": config.execution.fail_fast or fail_fast,
            "timeout_s": timeout if timeout is not None else config.execution.timeout_s,
        }
    )
    checks = config.checks.model_copy(
        update={"disabled": [*config.checks.disabled, *(skip or [])]}
    )
    return config.model_copy(update={"execution": execution, "checks": checks})


def resolve_languages(project_path: Path, config: ProjectConfig) -> list[Language] | None:
    if config.language.explicit:
        return list(config.language.explicit)
    if not config.language.auto_detect:
        return None
    return LanguageDetector().detect(project_path).languages


async def run_evaluation(
    project_path: Path,
    config: ProjectConfig,
    show_progress: bool = True,
) -> EvaluationReport:
    languages = resolve_languages(project_path, config)
    logger.debug("Languages for {}: {}", project_path, languages)

    use_case = EvaluateProject(
        registry=create_check_registry(),
        orchestrator=CheckOrchestrator(
            RunOptions(
                parallel=config.execution.parallel,
                workers=config.execution.workers,
                check_timeout_s=config.execution.timeout_s,
                fail_fast=config.execution.fail_fast,
            )
        ),
    )

    cancel_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # Not available on every platform (e.g. Windows event loops)
        with contextlib.suppress(NotImplementedError, RuntimeError, ValueError):
            loop.add_signal_handler(sig, cancel_event.set)

    try:
        if show_progress and console.is_terminal:
            with check_progress(console) as on_progress:
                return await use_case.execute(
                    project_path,
                    config,
                    languages,
                    cancel_event=cancel_event,
                    on_progress=on_progress,
                )
        return await use_case.execute(project_path, config, languages, cancel_event=cancel_event)
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            with contextlib.suppress(NotImplementedError, RuntimeError, ValueError):
                loop.remove_signal_handler(sig)
