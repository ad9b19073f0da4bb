from collections.abc import Callable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)


@contextmanager
def check_progress(
    console: Console,
    total: int | None = None,
) -> Iterator[Callable[[int, int], None]]:
    """Progress bar; yields a (completed, total) callback for the orchestrator."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Running checks", total=total)

        def on_progress(completed: int, total: int) -> None:
            progress.update(task, completed=completed, total=total)

        yield on_progress
