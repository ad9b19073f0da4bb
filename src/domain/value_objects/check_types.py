from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.check_enums import Language, Severity


class CheckMetadata(BaseModel, frozen=True):
    id: str = Field(min_length=1)
    name: str
    languages: tuple[Language, ...] = Field(default=(Language.COMMON,), min_length=1)
    critical: bool = False
    order: int = 0
    description: str = ""
    suggestion: str = ""

    def applies_to(self, languages: set[Language]) -> bool:
        """True for ecosystem-agnostic checks or when any language matches."""
        return Language.COMMON in self.languages or bool(languages.intersection(self.languages))


class ExternalCheckSpec(BaseModel, frozen=True):
    """A project-declared command run as a check."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    command: str
    args: tuple[str, ...] = ()
    severity: Severity = Severity.WARN
    source_dir: str | None = None
    timeout_s: float = Field(default=30.0, gt=0)


class ExternalOutput(BaseModel):
    """Optional JSON payload an external command may print."""

    model_config = ConfigDict(extra="ignore")

    message: str = ""
    status: str = ""
