import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..context import ConstraintMappingContext, MapperSettings, PropertyHandle
from ..exceptions import SchemaNotSetError
from ..protocols import PropertyMapper, SingleConstraintMapper

if TYPE_CHECKING:
    from apidoc_constraints.models.constraints import Constraint
    from apidoc_constraints.models.openapi import Property, Schema, SchemaNode

logger = logging.getLogger(__name__)


class BaseConstraintMapper(PropertyMapper, ABC):
    """
    Base class for constraint mappers acting as a dispatcher.

    Provides common logic for registering and delegating to
    "SingleConstraintMapper" strategies, keeping the way constraints are
    discovered abstracted.

    Subclasses must implement:
    - _extract_constraints(): Logic for reading the constraint declarations of
      a property (e.g., from type annotations or a prepared registry).
    """

    def __init__(self, settings: MapperSettings | None = None):
        """Initializes the mapper and the strategy registry."""
        self._logger = logger.getChild(self.__class__.__name__)
        self._mappers: dict[str, SingleConstraintMapper] = {}
        self._settings = settings or MapperSettings()
        self._schema: "Schema | None" = None

    @property
    def settings(self) -> MapperSettings:
        return self._settings

    @property
    def schema(self) -> "Schema | None":
        return self._schema

    # --- Protocol Implementation (Common Logic) ---

    def register_mapper(
        self, kind: "str | type[Constraint]", mapper: SingleConstraintMapper
    ) -> None:
        """
        Registers a specific mapper for a constraint kind.
        A constraint class may be given instead of its kind name.
        """
        if not isinstance(kind, str):
            kind = kind.kind
        if kind in self._mappers:
            self._logger.warning(f"Overwriting mapper for constraint kind: '{kind}'")
        self._logger.info(
            f"Registering mapper '{mapper.__class__.__name__}' for kind '{kind}'"
        )

        self._mappers[kind] = mapper

    def get_registered_mappers(self) -> dict[str, SingleConstraintMapper]:
        """Returns the dictionary of registered mappers."""
        return self._mappers

    def set_schema(self, schema: "Schema") -> None:
        """Binds the schema whose required-list the mapper updates."""
        self._schema = schema

    def update_property(
        self,
        handle: PropertyHandle,
        node: "Property",
        validation_groups: Iterable[str] | None = None,
    ) -> None:
        """
        Applies the constraints declared on a property to its schema node.

        1. Calls the abstract method `_extract_constraints` to obtain the
           declarations.
        2. Applies them in declaration order, delegating each one to the
           mapper registered for its kind.

        Args:
            handle: The described property
            node: The property's node in the bound schema
            validation_groups: Groups to filter on (only honoured when the
                settings enable validation groups)

        Raises:
            SchemaNotSetError: If no schema has been bound with set_schema()
        """
        if self._schema is None:
            raise SchemaNotSetError(
                f"Cannot update '{handle.qualified_name}': no schema has been set"
            )

        context = ConstraintMappingContext(
            schema=self._schema,
            handle=handle,
            property_name=node.property or handle.name,
            validation_groups=self._settings.resolve_groups(validation_groups),
            apply_constraints=self.apply_constraints,
        )

        try:
            # Delegates to the subclass to find the declarations
            constraints = list(self._extract_constraints(handle))
            self._logger.debug(
                f"Applying {len(constraints)} constraint(s) to "
                f"'{handle.qualified_name}'"
            )
            self.apply_constraints(constraints, node, context)

        except Exception as e:
            self._logger.error(
                f"Failed to map constraints of '{handle.qualified_name}': {e}",
                exc_info=True,
            )
            raise

    def apply_constraints(
        self,
        constraints: Iterable["Constraint"],
        node: "SchemaNode",
        context: ConstraintMappingContext,
    ) -> None:
        """Applies declarations, in order, to a node. Unknown kinds are ignored."""
        for constraint in constraints:
            groups = context.validation_groups
            if groups is not None and not constraint.applies_to(groups):
                self._logger.debug(
                    f"Skipping {constraint.kind} on '{context.property_name}': "
                    f"not in groups {list(groups)}"
                )
                continue

            mapper_strategy = self._mappers.get(constraint.kind)

            if mapper_strategy is None:
                self._logger.debug(
                    f"No mapper registered for constraint kind: "
                    f"'{constraint.kind}'. Skipping."
                )
                continue

            # Uses can_map for a finer check
            if not mapper_strategy.can_map(constraint):
                self._logger.debug(
                    f"The mapper for '{constraint.kind}' does not apply to the "
                    f"declaration on '{context.property_name}'. Skipping."
                )
                continue

            mapper_strategy.map_constraint(constraint, node, context)

    # --- Abstract Method (Source-Specific Logic) ---

    @abstractmethod
    def _extract_constraints(self, handle: PropertyHandle) -> Iterable["Constraint"]:
        """
        Source-specific method to read the declarations of a property.

        Args:
            handle: The described property

        Returns:
            The constraint declarations in declaration order.
        """
        pass
