from collections import Counter
from collections.abc import Iterable

from src.domain.entities.check_registration import CheckRegistration
from src.domain.entities.check_result import CheckResult
from src.domain.value_objects.check_enums import CheckStatus
from src.domain.value_objects.maturity import MaturityLevel, MaturityReport


class MaturityScorer:
    """Folds check results into a maturity score and a critical-failure gate.

    Only counts and sets are used, so the report depends on the multiset of
    results and never on the order they were produced in.
    """

    def evaluate(
        self,
        results: Iterable[CheckResult],
        registrations: Iterable[CheckRegistration] = (),
    ) -> MaturityReport:
        results = list(results)
        critical_ids = {r.metadata.id for r in registrations if r.metadata.critical}

        counts = Counter(r.status for r in results)
        passed = counts[CheckStatus.PASS]
        warnings = counts[CheckStatus.WARN]
        failed = counts[CheckStatus.FAIL]
        total = len(results)

        critical_failures = tuple(
            sorted({r.id for r in results if r.status == CheckStatus.FAIL and r.id in critical_ids})
        )

        if total == 0:
            return MaturityReport(
                score=0.0,
                level=MaturityLevel.POC,
                passed=0,
                warnings=0,
                failed=0,
                total=0,
            )

        score = passed / total * 100
        level, suggestions = self._classify(score, warnings, failed)

        if critical_failures:
            suggestions = [
                f"Critical check failed: {', '.join(critical_failures)}",
                *suggestions,
            ]

        return MaturityReport(
            score=score,
            level=level,
            passed=passed,
            warnings=warnings,
            failed=failed,
            total=total,
            critical_failures=critical_failures,
            suggestions=tuple(suggestions),
        )

    def _classify(
        self,
        score: float,
        warnings: int,
        failed: int,
    ) -> tuple[MaturityLevel, list[str]]:
        suggestions: list[str] = []

        if failed == 0 and warnings == 0 and score == 100:
            return MaturityLevel.PRODUCTION_READY, suggestions

        if failed == 0 and score >= 80:
            if warnings > 0:
                suggestions.append("Address warnings to reach production-ready status")
            return MaturityLevel.MATURE, suggestions

        if failed <= 2 and score >= 60:
            suggestions.append("Fix failing checks to improve maturity")
            if warnings > 0:
                suggestions.append("Review and address warnings")
            return MaturityLevel.DEVELOPMENT, suggestions

        suggestions.append("Focus on critical checks first (build, tests)")
        if failed > 2:
            suggestions.append("Many checks failing - prioritize fixing build and test failures")
        return MaturityLevel.POC, suggestions
