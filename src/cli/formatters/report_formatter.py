from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.application.dto.evaluation_report import EvaluationReport
from src.cli.theme import theme
from src.domain.entities.check_registration import CheckRegistration
from src.domain.value_objects.check_enums import CheckStatus

STATUS_STYLES = {
    CheckStatus.PASS: theme.STATUS_PASS,
    CheckStatus.WARN: theme.STATUS_WARN,
    CheckStatus.FAIL: theme.STATUS_FAIL,
}


def format_report(console: Console, report: EvaluationReport) -> None:
    table = Table(title=f"Checks for {report.project_path}", show_lines=False)
    table.add_column("Status", width=6)
    table.add_column("Check", style=theme.TABLE_ID)
    table.add_column("Message")
    table.add_column("Duration", style=theme.TABLE_LABEL, justify="right")

    critical = set(report.maturity.critical_failures)
    for result in report.results:
        style = STATUS_STYLES[result.status]
        name = result.name or result.id
        if result.id in critical:
            name = f"{name} [{theme.CRITICAL}](critical)[/]"
        table.add_row(
            f"[{style}]{result.status.value.upper()}[/]",
            name,
            result.message,
            f"{result.duration_ms}ms",
        )

    console.print(table)

    if report.skipped:
        console.print(f"[{theme.DIM}]Skipped: {', '.join(report.skipped)}[/]")

    format_maturity(console, report)


def format_maturity(console: Console, report: EvaluationReport) -> None:
    maturity = report.maturity

    lines = [
        f"[{theme.HEADER}]Score:[/] {maturity.score:.1f}%  "
        f"([{theme.SUCCESS}]{maturity.passed} passed[/], "
        f"[{theme.WARNING}]{maturity.warnings} warnings[/], "
        f"[{theme.ERROR}]{maturity.failed} failed[/])",
        f"[{theme.HEADER}]Level:[/] {maturity.level.label} - {maturity.level.description}",
    ]
    if report.cancelled:
        lines.append(f"[{theme.WARNING_BOLD}]Run cancelled: partial report[/]")
    if maturity.critical_failures:
        lines.append(
            f"[{theme.ERROR_BOLD}]Critical failures:[/] {', '.join(maturity.critical_failures)}"
        )
    for suggestion in maturity.suggestions:
        lines.append(f"[{theme.DIM}]• {suggestion}[/]")

    gate_ok = maturity.gate_passed and not report.cancelled
    console.print(
        Panel(
            "\n".join(lines),
            title="Maturity",
            border_style=theme.BORDER_INFO if gate_ok else theme.BORDER_ERROR,
        )
    )


def format_registrations(console: Console, registrations: list[CheckRegistration]) -> None:
    table = Table(title="Registered Checks")
    table.add_column("Order", style=theme.TABLE_LABEL, justify="right")
    table.add_column("ID", style=theme.TABLE_ID)
    table.add_column("Name", style=theme.TABLE_VALUE)
    table.add_column("Critical")
    table.add_column("Description", style=theme.TABLE_LABEL)

    for reg in registrations:
        meta = reg.metadata
        table.add_row(
            str(meta.order),
            meta.id,
            meta.name,
            f"[{theme.CRITICAL}]yes[/]" if meta.critical else "no",
            meta.description,
        )

    console.print(table)
