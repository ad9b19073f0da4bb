import asyncio
import os
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from loguru import logger

from src.application.dto.suite_result import RunOptions, SuiteResult
from src.domain.entities.check_registration import CheckRegistration
from src.domain.entities.check_result import CheckResult
from src.domain.value_objects.check_enums import CheckStatus, Language

# Called with (completed, total) after each check finishes
ProgressCallback = Callable[[int, int], None]


class CheckOrchestrator:
    """Runs registered checks against a project and collects their results.

    A check that raises, times out or returns garbage is recorded as WARN
    (FAIL when its metadata is critical) and the run carries on. Results
    are always reported in registration order, so sequential and parallel
    runs produce the same list.
    """

    def __init__(self, options: RunOptions | None = None) -> None:
        self.options = options or RunOptions()

    async def run(
        self,
        project_path: Path,
        registrations: Sequence[CheckRegistration],
        cancel_event: asyncio.Event | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> SuiteResult:
        """Execute every registration.

        Setting cancel_event stops the run: in-flight checks are cancelled
        and the checks finished so far are returned with cancelled=True.
        """
        start = time.monotonic()
        ordered = sorted(registrations, key=lambda r: r.metadata.order)
        total = len(ordered)
        slots: dict[int, CheckResult] = {}
        stop = asyncio.Event()

        queue: asyncio.Queue[int] = asyncio.Queue()
        for idx in range(total):
            queue.put_nowait(idx)

        async def worker() -> None:
            while True:
                try:
                    idx = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                if stop.is_set():
                    continue

                reg = ordered[idx]
                result = await self._execute(project_path, reg)
                slots[idx] = result

                if on_progress is not None:
                    _report_progress(on_progress, len(slots), total)

                if (
                    self.options.fail_fast
                    and reg.metadata.critical
                    and result.status == CheckStatus.FAIL
                ):
                    logger.warning(
                        "Critical check '{}' failed, skipping checks not yet started",
                        reg.metadata.id,
                    )
                    stop.set()

        worker_count = self._worker_count(total)
        logger.info(
            "Running {} check(s) against {} with {} worker(s)",
            total,
            project_path,
            worker_count,
        )

        pool = asyncio.gather(*(worker() for _ in range(worker_count)))
        cancelled = await _wait_or_cancel(pool, cancel_event)

        results = [slots[i] for i in range(total) if i in slots]
        skipped = [ordered[i].metadata.id for i in range(total) if i not in slots]
        duration_ms = int((time.monotonic() - start) * 1000)

        if cancelled:
            logger.warning(
                "Run cancelled after {}/{} check(s)",
                len(results),
                total,
            )
        logger.info(
            "Finished {} check(s) in {}ms ({} skipped)",
            len(results),
            duration_ms,
            len(skipped),
        )

        return SuiteResult(
            results=results,
            skipped=skipped,
            cancelled=cancelled,
            duration_ms=duration_ms,
        )

    async def _execute(self, project_path: Path, reg: CheckRegistration) -> CheckResult:
        meta = reg.metadata
        timeout_s = self.options.check_timeout_s
        start = time.monotonic()

        try:
            result = await asyncio.wait_for(reg.checker.run(project_path), timeout=timeout_s)
        except TimeoutError:
            logger.warning("Check '{}' timed out after {}s", meta.id, timeout_s)
            result = _fault_result(reg, f"Check '{meta.id}' timed out after {timeout_s:g}s")
        except Exception as e:
            logger.opt(exception=e).error(
                "Check '{}' raised {}: {}",
                meta.id,
                type(e).__name__,
                e,
            )
            result = _fault_result(reg, f"Check '{meta.id}' raised {type(e).__name__}: {e}")
        else:
            if not isinstance(result, CheckResult):
                logger.error(
                    "Check '{}' returned {} instead of a CheckResult",
                    meta.id,
                    type(result).__name__,
                )
                result = _fault_result(
                    reg,
                    f"Check '{meta.id}' returned {type(result).__name__} instead of a result",
                )

        duration_ms = int((time.monotonic() - start) * 1000)
        return result.model_copy(update={"duration_ms": duration_ms})

    def _worker_count(self, total: int) -> int:
        if not self.options.parallel:
            return 1
        workers = self.options.workers or os.cpu_count() or 1
        return max(1, min(workers, total))


def _fault_result(reg: CheckRegistration, message: str) -> CheckResult:
    meta = reg.metadata
    language = Language.COMMON
    if meta.languages and Language.COMMON not in meta.languages:
        language = meta.languages[0]
    return CheckResult(
        id=meta.id,
        name=meta.name,
        status=CheckStatus.FAIL if meta.critical else CheckStatus.WARN,
        message=message,
        language=language,
    )


def _report_progress(on_progress: ProgressCallback, completed: int, total: int) -> None:
    try:
        on_progress(completed, total)
    except Exception as e:
        logger.opt(exception=e).error("Progress callback failed at {}/{}", completed, total)


async def _wait_or_cancel(
    pool: asyncio.Future[list[None]],
    cancel_event: asyncio.Event | None,
) -> bool:
    """Wait for the worker pool; return True if cancel_event stopped it."""
    waiters: set[asyncio.Future[object]] = {pool}
    cancel_waiter: asyncio.Task[bool] | None = None
    if cancel_event is not None:
        cancel_waiter = asyncio.create_task(cancel_event.wait())
        waiters.add(cancel_waiter)

    try:
        await asyncio.wait(waiters, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        pool.cancel()
        raise
    finally:
        if cancel_waiter is not None:
            cancel_waiter.cancel()

    if pool.done():
        pool.result()
        return False

    pool.cancel()
    # Let cancelled checks unwind (and kill their subprocesses) before reporting
    await asyncio.wait({pool})
    return True
