from src.application.use_cases.evaluate_project import EvaluateProject

__all__ = ["EvaluateProject"]
