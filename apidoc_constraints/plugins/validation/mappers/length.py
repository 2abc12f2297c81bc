import logging
from typing import TYPE_CHECKING

from apidoc_constraints.core.protocols import SingleConstraintMapper
from apidoc_constraints.models.constraints import Constraint, Count, Length

if TYPE_CHECKING:
    from apidoc_constraints.core.context import ConstraintMappingContext
    from apidoc_constraints.models.openapi import SchemaNode

logger = logging.getLogger(__name__)


class LengthMapper(SingleConstraintMapper):
    """Map a Length declaration to minLength / maxLength."""

    def can_map(self, constraint: Constraint) -> bool:
        return isinstance(constraint, Length)

    def map_constraint(
        self,
        constraint: Length,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        """Sets each declared bound; an undeclared bound is left untouched."""
        logger.debug(
            f"Length on '{context.property_name}': "
            f"min={constraint.min}, max={constraint.max}"
        )
        if constraint.min is not None:
            node.min_length = constraint.min
        if constraint.max is not None:
            node.max_length = constraint.max


class CountMapper(SingleConstraintMapper):
    """Map a Count declaration to minItems / maxItems."""

    def can_map(self, constraint: Constraint) -> bool:
        return isinstance(constraint, Count)

    def map_constraint(
        self,
        constraint: Count,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        if constraint.min is not None:
            node.min_items = constraint.min
        if constraint.max is not None:
            node.max_items = constraint.max
