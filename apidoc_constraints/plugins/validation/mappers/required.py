import logging
from typing import TYPE_CHECKING

from apidoc_constraints.core.protocols import SingleConstraintMapper
from apidoc_constraints.models.constraints import Constraint, NotBlank, NotNull

if TYPE_CHECKING:
    from apidoc_constraints.core.context import ConstraintMappingContext
    from apidoc_constraints.models.openapi import SchemaNode

logger = logging.getLogger(__name__)


class NotBlankMapper(SingleConstraintMapper):
    """Map a NotBlank declaration to the schema's required-list."""

    def can_map(self, constraint: Constraint) -> bool:
        """A NotBlank that accepts None does not make the property required."""
        return isinstance(constraint, NotBlank) and not constraint.allow_null

    def map_constraint(
        self,
        constraint: Constraint,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        logger.debug(f"Marking '{context.property_name}' as required (NotBlank)")
        context.mark_required()


class NotNullMapper(SingleConstraintMapper):
    """Map a NotNull declaration to the schema's required-list."""

    def can_map(self, constraint: Constraint) -> bool:
        return isinstance(constraint, NotNull)

    def map_constraint(
        self,
        constraint: Constraint,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        logger.debug(f"Marking '{context.property_name}' as required (NotNull)")
        context.mark_required()
