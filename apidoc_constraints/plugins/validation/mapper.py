import logging
from collections.abc import Iterable

from apidoc_constraints.core.common.base_mapper import BaseConstraintMapper
from apidoc_constraints.core.context import MapperSettings, PropertyHandle
from apidoc_constraints.core.protocols import ConstraintSource
from apidoc_constraints.models.constraints import (
    All,
    Choice,
    Constraint,
    Count,
    GreaterThan,
    GreaterThanOrEqual,
    Length,
    LessThan,
    LessThanOrEqual,
    NotBlank,
    NotNull,
    Range,
    Regex,
)

from .mappers import (
    AllMapper,
    ChoiceMapper,
    CountMapper,
    LengthMapper,
    LowerBoundMapper,
    NotBlankMapper,
    NotNullMapper,
    RangeMapper,
    RegexMapper,
    UpperBoundMapper,
)
from .sources import AnnotatedConstraintSource

logger = logging.getLogger(__name__)


class ValidationConstraintMapper(BaseConstraintMapper):
    """
    Validation-constraint mapper.

    Reads declarations through a ConstraintSource (``Annotated`` hints by
    default) and maps the built-in constraint kinds onto OpenAPI keywords.
    """

    def __init__(
        self,
        source: ConstraintSource | None = None,
        settings: MapperSettings | None = None,
    ) -> None:
        super().__init__(settings)
        self._source: ConstraintSource = source or AnnotatedConstraintSource()

        # --- Mapper registration ---
        # Central place to enable support for individual constraint kinds.
        self._register_mappers()

    @property
    def source(self) -> ConstraintSource:
        return self._source

    def _register_mappers(self) -> None:
        """Register all built-in single-mappers."""
        self._logger.info("Registering validation constraint mappers...")

        # Presence
        self.register_mapper(NotBlank, NotBlankMapper())
        self.register_mapper(NotNull, NotNullMapper())

        # Strings and collections
        self.register_mapper(Length, LengthMapper())
        self.register_mapper(Count, CountMapper())
        self.register_mapper(Regex, RegexMapper())
        self.register_mapper(Choice, ChoiceMapper())
        self.register_mapper(All, AllMapper())

        # Numbers
        self.register_mapper(Range, RangeMapper())
        upper = UpperBoundMapper()
        self.register_mapper(LessThan, upper)
        self.register_mapper(LessThanOrEqual, upper)
        lower = LowerBoundMapper()
        self.register_mapper(GreaterThan, lower)
        self.register_mapper(GreaterThanOrEqual, lower)

        self._logger.info(f"Registered {len(self._mappers)} constraint mappers")

    def _extract_constraints(self, handle: PropertyHandle) -> Iterable[Constraint]:
        return self._source.constraints_for(handle)
