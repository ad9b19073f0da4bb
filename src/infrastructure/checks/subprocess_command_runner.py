import asyncio
import os
import shutil
import signal
import time
from pathlib import Path

from loguru import logger

from src.domain.ports.command_runner_port import CommandOutput, CommandRunnerPort


class SubprocessCommandRunner(CommandRunnerPort):
    """Runs commands as child processes without a shell."""

    def resolve(self, command: str) -> str | None:
        resolved = shutil.which(command)
        if resolved is None:
            return None
        return str(Path(resolved).absolute())

    async def run(
        self,
        argv: list[str],
        cwd: Path,
        timeout_s: float,
    ) -> CommandOutput:
        start = time.monotonic()

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                cwd=str(cwd),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,  # Own process group so children die with it
            )
        except OSError as e:
            logger.error("Failed to start '{}': {}", argv[0], e)
            return CommandOutput(
                exit_code=-1,
                stdout="",
                stderr=str(e),
                duration_ms=_elapsed_ms(start),
                launched=False,
            )

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(),
                timeout=timeout_s,
            )
        except TimeoutError:
            await _kill_process_group(proc)
            logger.warning("Command '{}' timed out after {}s", argv[0], timeout_s)
            return CommandOutput(
                exit_code=-1,
                stdout="",
                stderr=f"Timeout after {timeout_s}s",
                duration_ms=_elapsed_ms(start),
                timed_out=True,
            )
        except asyncio.CancelledError:
            await _kill_process_group(proc)
            logger.debug("Command '{}' cancelled, process group killed", argv[0])
            raise

        return CommandOutput(
            exit_code=proc.returncode if proc.returncode is not None else -1,
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
            duration_ms=_elapsed_ms(start),
        )


async def _kill_process_group(proc: asyncio.subprocess.Process) -> None:
    try:
        os.killpg(os.getpgid(proc.pid), signal.SIGKILL)
    except (ProcessLookupError, OSError):
        # Process already terminated
        try:
            proc.kill()
        except ProcessLookupError:
            pass
    await proc.wait()


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
