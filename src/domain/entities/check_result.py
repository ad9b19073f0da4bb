from pydantic import BaseModel, Field, computed_field, model_validator

from src.domain.value_objects.check_enums import CheckStatus, Language


class CheckResult(BaseModel, frozen=True):
    """Outcome of one check execution."""

    id: str = Field(min_length=1)
    name: str
    status: CheckStatus
    message: str = ""
    language: Language = Language.COMMON
    duration_ms: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        """Derived from status; kept in the serialized form for older consumers."""
        return self.status == CheckStatus.PASS

    @model_validator(mode="after")
    def _require_message_when_not_passing(self) -> "CheckResult":
        if self.status != CheckStatus.PASS and not self.message.strip():
            raise ValueError(f"{self.status.value} result for '{self.id}' needs a message")
        return self
