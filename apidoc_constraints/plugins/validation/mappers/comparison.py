import logging
from typing import TYPE_CHECKING

from apidoc_constraints.core.protocols import SingleConstraintMapper
from apidoc_constraints.models.constraints import (
    Constraint,
    GreaterThan,
    GreaterThanOrEqual,
    LessThan,
    LessThanOrEqual,
    Range,
)
from apidoc_constraints.models.openapi import UNSET

if TYPE_CHECKING:
    from apidoc_constraints.core.context import ConstraintMappingContext
    from apidoc_constraints.models.openapi import SchemaNode

logger = logging.getLogger(__name__)


class RangeMapper(SingleConstraintMapper):
    """Map a Range declaration to minimum / maximum."""

    def can_map(self, constraint: Constraint) -> bool:
        return isinstance(constraint, Range)

    def map_constraint(
        self,
        constraint: Range,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        # Range bounds are inclusive
        if constraint.min is not None:
            node.minimum = constraint.min
            node.exclusive_minimum = UNSET
        if constraint.max is not None:
            node.maximum = constraint.max
            node.exclusive_maximum = UNSET


class UpperBoundMapper(SingleConstraintMapper):
    """Map LessThan / LessThanOrEqual to maximum (exclusive for LessThan)."""

    def can_map(self, constraint: Constraint) -> bool:
        return isinstance(constraint, LessThan | LessThanOrEqual)

    def map_constraint(
        self,
        constraint: LessThan | LessThanOrEqual,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        node.maximum = constraint.value
        node.exclusive_maximum = True if isinstance(constraint, LessThan) else UNSET
        logger.debug(
            f"{constraint.kind} on '{context.property_name}': "
            f"maximum={constraint.value}"
        )


class LowerBoundMapper(SingleConstraintMapper):
    """Map GreaterThan / GreaterThanOrEqual to minimum (exclusive for GreaterThan)."""

    def can_map(self, constraint: Constraint) -> bool:
        return isinstance(constraint, GreaterThan | GreaterThanOrEqual)

    def map_constraint(
        self,
        constraint: GreaterThan | GreaterThanOrEqual,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        node.minimum = constraint.value
        node.exclusive_minimum = True if isinstance(constraint, GreaterThan) else UNSET
        logger.debug(
            f"{constraint.kind} on '{context.property_name}': "
            f"minimum={constraint.value}"
        )
