"""End-to-end runs with real scripts, real subprocesses and a YAML config."""

import asyncio
import sys
import time
from pathlib import Path

import pytest

from src.application.dto.suite_result import RunOptions
from src.application.orchestrator import CheckOrchestrator
from src.application.use_cases.evaluate_project import EvaluateProject
from src.domain.value_objects.check_enums import CheckStatus
from src.infrastructure.checks.registry_factory import create_check_registry
from src.infrastructure.config import YamlConfigLoader

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell scripts")


def _script(directory: Path, name: str, body: str) -> Path:
    path = directory / name
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


@pytest.fixture
def tools_dir(tmp_path: Path) -> Path:
    tools = tmp_path / "tools"
    tools.mkdir()
    _script(tools, "json_warn.sh", 'echo \'{"status": "WARNING", "message": "2 issues"}\'\n')
    _script(tools, "exit_two.sh", "echo 'broken build' >&2\nexit 2\n")
    _script(tools, "echo_args.sh", 'printf "%s|" "$@"\n')
    _script(tools, "slow.sh", "sleep 30\n")
    _script(tools, "pwd.sh", "pwd -P\n")
    return tools


async def _evaluate(project: Path, options: RunOptions | None = None, **kwargs):
    config = YamlConfigLoader().load(project)
    use_case = EvaluateProject(
        registry=create_check_registry(),
        orchestrator=CheckOrchestrator(options or RunOptions()),
    )
    return await use_case.execute(project, config, **kwargs)


def _write_config(project: Path, tools: Path, external_yaml: str) -> None:
    (project / ".maturity.yaml").write_text(
        'checks:\n  disabled: ["common:*"]\nexternal:\n'
        + external_yaml.replace("TOOLS", str(tools))
    )


class TestExternalChecksEndToEnd:
    async def test_protocol_channels(self, project_dir: Path, tools_dir: Path) -> None:
        _write_config(
            project_dir,
            tools_dir,
            """\
  - {id: "ext:json", name: "Json", command: "TOOLS/json_warn.sh"}
  - {id: "ext:build", name: "Build", command: "TOOLS/exit_two.sh", severity: fail}
  - {id: "ext:args", name: "Args", command: "TOOLS/echo_args.sh", args: ["a b", "$(id)", ";x"]}
""",
        )

        report = await _evaluate(project_dir)

        by_id = {r.id: r for r in report.results}
        assert by_id["ext:json"].status == CheckStatus.WARN
        assert by_id["ext:json"].message == "2 issues"
        assert by_id["ext:build"].status == CheckStatus.FAIL
        assert by_id["ext:build"].message == "broken build"
        assert by_id["ext:args"].status == CheckStatus.PASS
        assert by_id["ext:args"].message == "a b|$(id)|;x|"
        assert report.maturity.critical_failures == ("ext:build",)
        assert not report.maturity.gate_passed

    async def test_runs_in_source_dir(self, project_dir: Path, tools_dir: Path) -> None:
        (project_dir / "service").mkdir()
        _write_config(
            project_dir,
            tools_dir,
            '  - {id: "ext:pwd", name: "Pwd", command: "TOOLS/pwd.sh", source_dir: service}\n',
        )

        report = await _evaluate(project_dir)

        assert report.results[-1].message == str((project_dir / "service").resolve())

    async def test_timeout_kills_slow_command(self, project_dir: Path, tools_dir: Path) -> None:
        _write_config(
            project_dir,
            tools_dir,
            '  - {id: "ext:slow", name: "Slow", command: "TOOLS/slow.sh", timeout_s: 0.5}\n',
        )
        start = time.monotonic()

        report = await _evaluate(project_dir)

        slow = report.results[-1]
        assert slow.status == CheckStatus.WARN
        assert slow.message == "Command timed out after 0.5s"
        assert time.monotonic() - start < 5

    async def test_cancellation_returns_partial_report(
        self, project_dir: Path, tools_dir: Path
    ) -> None:
        _write_config(
            project_dir,
            tools_dir,
            '  - {id: "ext:slow", name: "Slow", command: "TOOLS/slow.sh"}\n',
        )
        cancel = asyncio.Event()
        asyncio.get_running_loop().call_later(0.3, cancel.set)
        start = time.monotonic()

        report = await _evaluate(
            project_dir, RunOptions(parallel=False), cancel_event=cancel
        )

        assert report.cancelled
        assert [r.id for r in report.results] == ["file_exists"]
        assert report.skipped == ["ext:slow"]
        assert time.monotonic() - start < 5

    async def test_missing_and_non_executable_commands(
        self, project_dir: Path, tools_dir: Path
    ) -> None:
        (tools_dir / "plain.sh").write_text("#!/bin/sh\nexit 0\n")
        _write_config(
            project_dir,
            tools_dir,
            """\
  - {id: "ext:missing", name: "Missing", command: "no-such-tool-4711"}
  - {id: "ext:plain", name: "Plain", command: "TOOLS/plain.sh"}
""",
        )

        report = await _evaluate(project_dir)

        by_id = {r.id: r for r in report.results}
        assert by_id["ext:missing"].message == "Command not found: no-such-tool-4711"
        assert by_id["ext:plain"].status == CheckStatus.WARN
        assert report.maturity.gate_passed
