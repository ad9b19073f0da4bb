from src.application.dto.evaluation_report import EvaluationReport
from src.application.dto.suite_result import RunOptions, SuiteResult

__all__ = ["EvaluationReport", "RunOptions", "SuiteResult"]
