from src.domain.entities.check_result import CheckResult
from src.domain.entities.check_registration import CheckRegistration

__all__ = ["CheckRegistration", "CheckResult"]
