"""SubprocessCommandRunner against real POSIX processes."""

import asyncio
import os
import shutil
import sys
import time
from pathlib import Path

import pytest

from src.infrastructure.checks.subprocess_command_runner import SubprocessCommandRunner

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX process groups")

SH = shutil.which("sh") or "/bin/sh"


@pytest.fixture
def runner() -> SubprocessCommandRunner:
    return SubprocessCommandRunner()


def _pid_alive(pid: int) -> bool:
    status = Path(f"/proc/{pid}/status")
    if Path("/proc/self").exists():
        try:
            # Orphans may linger as zombies until init reaps them
            return "(zombie)" not in status.read_text()
        except OSError:
            return False
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        return True
    return True


class TestResolve:
    def test_resolves_search_path_command(self, runner: SubprocessCommandRunner) -> None:
        resolved = runner.resolve("sh")

        assert resolved is not None
        assert Path(resolved).is_absolute()

    def test_unknown_command(self, runner: SubprocessCommandRunner) -> None:
        assert runner.resolve("definitely-not-a-real-command-4711") is None

    def test_absolute_executable(self, runner: SubprocessCommandRunner, tmp_path: Path) -> None:
        script = tmp_path / "check.sh"
        script.write_text("#!/bin/sh\nexit 0\n")
        script.chmod(0o755)

        assert runner.resolve(str(script)) == str(script)

    def test_absolute_non_executable(
        self, runner: SubprocessCommandRunner, tmp_path: Path
    ) -> None:
        script = tmp_path / "check.sh"
        script.write_text("#!/bin/sh\nexit 0\n")
        script.chmod(0o644)

        assert runner.resolve(str(script)) is None


class TestRun:
    async def test_captures_output_and_exit_code(
        self, runner: SubprocessCommandRunner, tmp_path: Path
    ) -> None:
        output = await runner.run(
            [SH, "-c", "echo out; echo err >&2; exit 3"], cwd=tmp_path, timeout_s=10
        )

        assert output.launched
        assert not output.timed_out
        assert output.exit_code == 3
        assert output.stdout == "out\n"
        assert output.stderr == "err\n"

    async def test_runs_in_cwd(self, runner: SubprocessCommandRunner, tmp_path: Path) -> None:
        output = await runner.run([SH, "-c", "pwd -P"], cwd=tmp_path, timeout_s=10)

        assert output.stdout.strip() == str(tmp_path.resolve())

    async def test_arguments_not_shell_interpreted(
        self, runner: SubprocessCommandRunner, tmp_path: Path
    ) -> None:
        marker = tmp_path / "pwned"
        output = await runner.run(
            [SH, "-c", 'printf "%s" "$1"', "sh", f"; touch {marker}"],
            cwd=tmp_path,
            timeout_s=10,
        )

        assert output.stdout == f"; touch {marker}"
        assert not marker.exists()

    async def test_missing_binary_not_launched(
        self, runner: SubprocessCommandRunner, tmp_path: Path
    ) -> None:
        output = await runner.run([str(tmp_path / "missing")], cwd=tmp_path, timeout_s=10)

        assert not output.launched
        assert output.exit_code == -1
        assert output.stderr

    async def test_timeout_kills_process_group(
        self, runner: SubprocessCommandRunner, tmp_path: Path
    ) -> None:
        pid_file = tmp_path / "child.pid"
        start = time.monotonic()

        output = await runner.run(
            [SH, "-c", f"sleep 30 & echo $! > {pid_file}; wait"],
            cwd=tmp_path,
            timeout_s=0.5,
        )

        assert output.timed_out
        assert time.monotonic() - start < 5
        child = int(pid_file.read_text())
        await asyncio.sleep(0.1)
        assert not _pid_alive(child)

    async def test_cancellation_kills_process(
        self, runner: SubprocessCommandRunner, tmp_path: Path
    ) -> None:
        pid_file = tmp_path / "sh.pid"
        task = asyncio.create_task(
            runner.run(
                [SH, "-c", f"echo $$ > {pid_file}; exec sleep 30"],
                cwd=tmp_path,
                timeout_s=60,
            )
        )
        for _ in range(50):
            if pid_file.exists() and pid_file.read_text().strip():
                break
            await asyncio.sleep(0.05)

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert not _pid_alive(int(pid_file.read_text()))
