from pydantic import BaseModel

from src.domain.entities.check_result import CheckResult
from src.domain.value_objects.check_enums import Language
from src.domain.value_objects.maturity import MaturityReport


class EvaluationReport(BaseModel):
    project_path: str
    languages: list[Language]
    results: list[CheckResult]
    skipped: list[str]
    cancelled: bool
    maturity: MaturityReport
    duration_ms: int
