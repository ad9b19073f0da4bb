from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field

from src.domain.value_objects.check_enums import Language

# Checked in this order; the first hit is the primary language
LANGUAGE_INDICATORS: dict[Language, tuple[str, ...]] = {
    Language.GO: ("go.mod", "go.sum"),
    Language.PYTHON: (
        "pyproject.toml",
        "setup.py",
        "requirements.txt",
        "Pipfile",
        "poetry.lock",
        "setup.cfg",
    ),
    Language.NODE: (
        "package.json",
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "bun.lockb",
    ),
    Language.JAVA: (
        "pom.xml",
        "build.gradle",
        "build.gradle.kts",
        "settings.gradle",
        "settings.gradle.kts",
        "mvnw",
        "gradlew",
    ),
    Language.RUST: ("Cargo.toml", "Cargo.lock"),
    Language.TYPESCRIPT: ("tsconfig.json",),
    Language.SWIFT: ("Package.swift",),
}


class DetectionResult(BaseModel):
    languages: list[Language] = Field(default_factory=list)
    indicators: dict[Language, list[str]] = Field(default_factory=dict)

    @property
    def primary(self) -> Language | None:
        return self.languages[0] if self.languages else None

    @property
    def multi_language(self) -> bool:
        return len(self.languages) > 1


class LanguageDetector:
    def detect(
        self,
        project_path: Path,
        explicit: Iterable[Language] = (),
    ) -> DetectionResult:
        """Detect project languages from indicator files.

        An explicit list short-circuits detection.
        """
        explicit = list(explicit)
        if explicit:
            return DetectionResult(languages=explicit)

        result = DetectionResult()
        for language, indicators in LANGUAGE_INDICATORS.items():
            found = [name for name in indicators if (project_path / name).exists()]
            if found:
                result.languages.append(language)
                result.indicators[language] = found
        return result
