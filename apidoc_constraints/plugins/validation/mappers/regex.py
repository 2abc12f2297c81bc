import logging
from typing import TYPE_CHECKING

from apidoc_constraints.core.protocols import SingleConstraintMapper
from apidoc_constraints.models.constraints import Constraint, Regex
from apidoc_constraints.models.openapi import UNSET

if TYPE_CHECKING:
    from apidoc_constraints.core.context import ConstraintMappingContext
    from apidoc_constraints.models.openapi import SchemaNode

logger = logging.getLogger(__name__)


class RegexMapper(SingleConstraintMapper):
    """Map a Regex declaration to the node's pattern."""

    def can_map(self, constraint: Constraint) -> bool:
        return isinstance(constraint, Regex)

    def map_constraint(
        self,
        constraint: Regex,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        """
        Appends the declaration's HTML pattern to the node.

        A node that already has a pattern gets both, joined with ", ". Negated
        patterns have no OpenAPI equivalent and are skipped.
        """
        pattern = constraint.get_html_pattern()
        if pattern is None:
            logger.debug(
                f"Regex on '{context.property_name}' has no HTML form. Skipping."
            )
            return

        if node.pattern is UNSET:
            node.pattern = pattern
        else:
            node.pattern = f"{node.pattern}, {pattern}"
