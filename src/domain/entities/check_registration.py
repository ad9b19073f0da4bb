from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.domain.value_objects.check_types import CheckMetadata

if TYPE_CHECKING:
    from src.domain.ports.checker_port import CheckerPort


@dataclass(frozen=True)
class CheckRegistration:
    """A checker paired with the policy the registry applies to it."""

    checker: CheckerPort
    metadata: CheckMetadata
