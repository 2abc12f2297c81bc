import logging
from typing import TYPE_CHECKING

from apidoc_constraints.core.protocols import SingleConstraintMapper
from apidoc_constraints.models.constraints import All, Constraint

if TYPE_CHECKING:
    from apidoc_constraints.core.context import ConstraintMappingContext
    from apidoc_constraints.models.openapi import SchemaNode

logger = logging.getLogger(__name__)


class AllMapper(SingleConstraintMapper):
    """Map an All declaration onto the node's Items schema."""

    def can_map(self, constraint: Constraint) -> bool:
        return isinstance(constraint, All)

    def map_constraint(
        self,
        constraint: All,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        if context.apply_constraints is None:
            raise RuntimeError(
                "AllMapper needs a context able to apply nested constraints"
            )

        logger.debug(
            f"Applying {len(constraint.constraints)} nested constraint(s) to the "
            f"items of '{context.property_name}'"
        )
        context.apply_constraints(
            constraint.constraints, node.ensure_items(), context.for_items()
        )
