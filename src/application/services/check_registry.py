from collections.abc import Callable, Iterable

from loguru import logger

from src.domain.entities.check_registration import CheckRegistration
from src.domain.ports.checker_port import CheckerPort
from src.domain.services.check_id_matcher import is_disabled
from src.domain.value_objects.check_enums import Language, Severity
from src.domain.value_objects.check_types import CheckMetadata, ExternalCheckSpec
from src.domain.value_objects.project_config import ProjectConfig

# External checks always run and report after every built-in check
EXTERNAL_CHECK_ORDER = 1000

BuiltinFactory = Callable[[ProjectConfig], list[CheckRegistration]]
ExternalFactory = Callable[[ExternalCheckSpec], CheckerPort]


class RegistryError(Exception):
    """The set of registrations is structurally invalid."""


class DuplicateCheckError(RegistryError):
    def __init__(self, check_id: str) -> None:
        super().__init__(f"Duplicate check id: {check_id}")
        self.check_id = check_id


class CheckRegistry:
    """Resolves a configuration into the ordered list of checks to run."""

    def __init__(
        self,
        builtin_factory: BuiltinFactory,
        external_factory: ExternalFactory,
    ) -> None:
        self._builtin_factory = builtin_factory
        self._external_factory = external_factory

    def build(
        self,
        config: ProjectConfig,
        languages: Iterable[Language] | None = None,
    ) -> list[CheckRegistration]:
        """Build registrations for config.

        Raises RegistryError (or DuplicateCheckError) before anything runs
        when the result would be ambiguous. Same input, same output.
        """
        builtins = self._builtin_factory(config)
        for reg in builtins:
            if reg.metadata.order >= EXTERNAL_CHECK_ORDER:
                raise RegistryError(
                    f"Built-in check '{reg.metadata.id}' has order {reg.metadata.order}, "
                    f"must be below {EXTERNAL_CHECK_ORDER}"
                )

        externals = [self._external_registration(spec) for spec in config.external]
        registrations = builtins + externals

        self._validate(registrations)

        registrations = [
            r for r in registrations if not is_disabled(r.metadata.id, config.checks.disabled)
        ]

        if languages is not None:
            wanted = set(languages)
            registrations = [r for r in registrations if r.metadata.applies_to(wanted)]

        # sorted() is stable: registration order breaks ties
        ordered = sorted(registrations, key=lambda r: r.metadata.order)
        logger.debug(
            "Registry built {} check(s) ({} external)",
            len(ordered),
            sum(1 for r in ordered if r.metadata.order == EXTERNAL_CHECK_ORDER),
        )
        return ordered

    def _external_registration(self, spec: ExternalCheckSpec) -> CheckRegistration:
        return CheckRegistration(
            checker=self._external_factory(spec),
            metadata=CheckMetadata(
                id=spec.id,
                name=spec.name,
                languages=(Language.COMMON,),
                critical=spec.severity == Severity.FAIL,
                order=EXTERNAL_CHECK_ORDER,
                description=f"External command: {spec.command}",
            ),
        )

    @staticmethod
    def _validate(registrations: list[CheckRegistration]) -> None:
        seen: set[str] = set()
        for reg in registrations:
            check_id = reg.metadata.id
            if reg.checker.check_id != check_id:
                raise RegistryError(
                    f"Metadata id '{check_id}' does not match checker id '{reg.checker.check_id}'"
                )
            if check_id in seen:
                raise DuplicateCheckError(check_id)
            seen.add(check_id)
