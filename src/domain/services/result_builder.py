from src.domain.entities.check_result import CheckResult
from src.domain.ports.checker_port import CheckerPort
from src.domain.value_objects.check_enums import CheckStatus, Language


class ResultBuilder:
    """Builds results carrying a checker's id, name and language."""

    def __init__(self, checker: CheckerPort, language: Language = Language.COMMON) -> None:
        self._id = checker.check_id
        self._name = checker.name
        self._language = language

    def pass_(self, message: str = "") -> CheckResult:
        return self._build(CheckStatus.PASS, message)

    def warn(self, message: str) -> CheckResult:
        return self._build(CheckStatus.WARN, message)

    def fail(self, message: str) -> CheckResult:
        return self._build(CheckStatus.FAIL, message)

    def _build(self, status: CheckStatus, message: str) -> CheckResult:
        return CheckResult(
            id=self._id,
            name=self._name,
            status=status,
            message=message,
            language=self._language,
        )
