from src.application.services.check_registry import (
    EXTERNAL_CHECK_ORDER,
    CheckRegistry,
    DuplicateCheckError,
    RegistryError,
)

__all__ = [
    "EXTERNAL_CHECK_ORDER",
    "CheckRegistry",
    "DuplicateCheckError",
    "RegistryError",
]
