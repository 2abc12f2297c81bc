"""
Constraint Mapping Context

Value objects handed to every constraint mapper: the handle of the property
being described, the mapper settings, and the per-call mapping context.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from apidoc_constraints.models.constraints import DEFAULT_GROUP

if TYPE_CHECKING:
    from apidoc_constraints.models.constraints import Constraint
    from apidoc_constraints.models.openapi import Schema, SchemaNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropertyHandle:
    """Reference to a property of a class: the owning type and the name."""

    owner: type
    name: str

    @property
    def qualified_name(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"


@dataclass
class MapperSettings:
    """
    Configuration of a constraint mapper.

    When ``use_validation_groups`` is off every constraint is applied and
    requested groups are ignored. When it is on, only constraints belonging to
    one of the requested groups (``default_groups`` if none are requested) are
    applied.
    """

    use_validation_groups: bool = False
    default_groups: tuple[str, ...] = (DEFAULT_GROUP,)

    def resolve_groups(
        self, validation_groups: Iterable[str] | None
    ) -> tuple[str, ...] | None:
        """Returns the groups to filter on, or None when nothing is filtered."""
        if not self.use_validation_groups:
            return None
        if validation_groups is None:
            return self.default_groups
        return tuple(validation_groups)


@dataclass
class ConstraintMappingContext:
    """
    Everything a single constraint mapper may touch besides its target node.

    Mappers reach the schema's required-list only through ``mark_required`` and
    nested constraints only through ``apply_constraints``.
    """

    schema: "Schema"
    handle: PropertyHandle
    property_name: str
    validation_groups: tuple[str, ...] | None = None
    apply_constraints: (
        Callable[
            [Iterable["Constraint"], "SchemaNode", "ConstraintMappingContext"], None
        ]
        | None
    ) = None
    # True while applying constraints to collection members
    nested: bool = False

    def mark_required(self) -> None:
        """Adds the described property to the schema's required-list."""
        if self.nested:
            logger.debug(
                f"Ignoring required marker on members of '{self.property_name}'"
            )
            return
        self.schema.mark_required(self.property_name)

    def for_items(self) -> "ConstraintMappingContext":
        """Returns a copy of the context for constraints on collection members."""
        return replace(self, nested=True)
