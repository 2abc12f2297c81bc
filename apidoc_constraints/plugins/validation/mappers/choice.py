import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from apidoc_constraints.core.exceptions import ChoiceResolutionError
from apidoc_constraints.core.protocols import SingleConstraintMapper
from apidoc_constraints.models.constraints import Choice, Constraint
from apidoc_constraints.utils.sequences import dense_values

if TYPE_CHECKING:
    from apidoc_constraints.core.context import ConstraintMappingContext, PropertyHandle
    from apidoc_constraints.models.openapi import SchemaNode

logger = logging.getLogger(__name__)


class ChoiceMapper(SingleConstraintMapper):
    """
    Map a Choice declaration to an enum.

    A single-value choice sets ``enum`` on the node itself; a multiple choice
    sets it on the node's Items. Only the values of the allowed set are kept,
    as a dense list in their original order.
    """

    def can_map(self, constraint: Constraint) -> bool:
        return isinstance(constraint, Choice)

    def map_constraint(
        self,
        constraint: Choice,
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        values = self.resolve_choices(constraint, context.handle)

        target = node.ensure_items() if constraint.multiple else node
        target.enum = values

        logger.debug(
            f"Choice on '{context.property_name}': "
            f"{'items.' if constraint.multiple else ''}enum={values}"
        )

    def resolve_choices(
        self, constraint: Choice, handle: "PropertyHandle"
    ) -> list[Any]:
        """
        Obtains the allowed values of a Choice declaration.

        The callback wins over ``choices``; a callable ``choices`` is invoked.

        Raises:
            ChoiceResolutionError: If no value set is declared, the resolver
                cannot be found or fails, or it returns no ordered collection
        """
        if constraint.callback is not None:
            resolver = self._resolve_callback(constraint.callback, handle)
        elif callable(constraint.choices):
            resolver = constraint.choices
        elif constraint.choices is not None:
            return dense_values(constraint.choices)
        else:
            raise ChoiceResolutionError(
                f"Choice on '{handle.qualified_name}' declares neither "
                "choices nor a callback"
            )

        try:
            values = resolver()
        except Exception as e:
            raise ChoiceResolutionError(
                f"Resolving the choices of '{handle.qualified_name}' failed: {e}"
            ) from e

        if isinstance(values, set | frozenset | str | bytes) or not isinstance(
            values, Mapping | Iterable
        ):
            raise ChoiceResolutionError(
                f"Choices of '{handle.qualified_name}' must resolve to an ordered "
                f"collection, got {type(values).__name__}"
            )
        return dense_values(values)

    @staticmethod
    def _resolve_callback(
        callback: Callable[[], Any] | str, handle: "PropertyHandle"
    ) -> Callable[[], Any]:
        if callable(callback):
            return callback

        target = getattr(handle.owner, callback, None)
        if target is None or not callable(target):
            raise ChoiceResolutionError(
                f"Choice callback '{callback}' of '{handle.qualified_name}' is "
                f"not a callable of {handle.owner.__qualname__}"
            )
        return target
