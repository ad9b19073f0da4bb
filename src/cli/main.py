import sys
from pathlib import Path

import typer
from loguru import logger

from src.cli.commands import check, list_checks


def get_log_dir() -> Path:
    return Path.home() / ".maturity" / "logs"


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> Path:
    """Configure loguru logging."""
    logger.remove()

    if log_file is None:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "maturity.log"

    logger.add(
        log_file,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="10 MB",
        encoding="utf-8",
    )

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )

    return log_file


app = typer.Typer(
    name="maturity",
    help="Evaluate a project's maturity with pluggable checks",
    no_args_is_help=True,
)

app.command(name="check")(check.check_project)
app.command(name="list")(list_checks.list_checks)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    log_file: Path | None = typer.Option(None, "--log-file", help="Write logs to this file"),
) -> None:
    """Evaluate a project's maturity with pluggable checks."""
    setup_logging(verbose=verbose, log_file=log_file)


if __name__ == "__main__":
    app()
