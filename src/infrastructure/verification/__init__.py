from src.infrastructure.verification.language_detector import (
    LANGUAGE_INDICATORS,
    DetectionResult,
    LanguageDetector,
)

__all__ = ["LANGUAGE_INDICATORS", "DetectionResult", "LanguageDetector"]
