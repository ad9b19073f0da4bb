import asyncio
import time
from pathlib import Path

from loguru import logger

from src.application.dto.evaluation_report import EvaluationReport
from src.application.orchestrator import CheckOrchestrator, ProgressCallback
from src.application.services.check_registry import CheckRegistry
from src.domain.services.maturity_scorer import MaturityScorer
from src.domain.value_objects.check_enums import Language
from src.domain.value_objects.project_config import ProjectConfig


class EvaluateProject:
    """Registry -> orchestrator -> scorer for one project."""

    def __init__(
        self,
        registry: CheckRegistry,
        orchestrator: CheckOrchestrator,
        scorer: MaturityScorer | None = None,
    ) -> None:
        self.registry = registry
        self.orchestrator = orchestrator
        self.scorer = scorer or MaturityScorer()

    async def execute(
        self,
        project_path: Path,
        config: ProjectConfig,
        languages: list[Language] | None = None,
        cancel_event: asyncio.Event | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> EvaluationReport:
        """Evaluate project_path.

        languages=None runs every registered check; otherwise checks are
        limited to those languages plus the language-agnostic ones.
        Registry errors propagate before any check runs.
        """
        start = time.monotonic()
        registrations = self.registry.build(config, languages)

        suite = await self.orchestrator.run(
            project_path,
            registrations,
            cancel_event=cancel_event,
            on_progress=on_progress,
        )
        maturity = self.scorer.evaluate(suite.results, registrations)

        logger.info(
            "Maturity {:.1f}% ({}), {} critical failure(s)",
            maturity.score,
            maturity.level.value,
            len(maturity.critical_failures),
        )

        return EvaluationReport(
            project_path=str(project_path),
            languages=languages or [],
            results=suite.results,
            skipped=suite.skipped,
            cancelled=suite.cancelled,
            maturity=maturity,
            duration_ms=int((time.monotonic() - start) * 1000),
        )
