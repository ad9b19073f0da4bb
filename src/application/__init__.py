from src.application.orchestrator import CheckOrchestrator, ProgressCallback

__all__ = ["CheckOrchestrator", "ProgressCallback"]
