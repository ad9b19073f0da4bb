from pathlib import Path

from src.domain.value_objects.check_enums import Language
from src.infrastructure.verification import LanguageDetector


class TestLanguageDetector:
    def test_empty_project(self, tmp_path: Path) -> None:
        result = LanguageDetector().detect(tmp_path)

        assert result.languages == []
        assert result.primary is None
        assert not result.multi_language

    def test_single_language(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[project]\n")
        (tmp_path / "requirements.txt").write_text("")

        result = LanguageDetector().detect(tmp_path)

        assert result.languages == [Language.PYTHON]
        assert result.indicators[Language.PYTHON] == ["pyproject.toml", "requirements.txt"]

    def test_multi_language_in_fixed_order(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("{}")
        (tmp_path / "tsconfig.json").write_text("{}")
        (tmp_path / "go.mod").write_text("module x\n")

        result = LanguageDetector().detect(tmp_path)

        assert result.languages == [Language.GO, Language.NODE, Language.TYPESCRIPT]
        assert result.primary == Language.GO
        assert result.multi_language

    def test_explicit_overrides_detection(self, tmp_path: Path) -> None:
        (tmp_path / "go.mod").write_text("module x\n")

        result = LanguageDetector().detect(tmp_path, explicit=[Language.RUST])

        assert result.languages == [Language.RUST]
        assert result.indicators == {}
