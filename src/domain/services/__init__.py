"""Domain services."""

from src.domain.services.check_id_matcher import is_disabled, matches_check_id
from src.domain.services.maturity_scorer import MaturityScorer
from src.domain.services.result_builder import ResultBuilder

__all__ = [
    "MaturityScorer",
    "ResultBuilder",
    "is_disabled",
    "matches_check_id",
]
