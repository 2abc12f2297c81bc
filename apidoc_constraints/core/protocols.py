from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apidoc_constraints.models.constraints import Constraint
    from apidoc_constraints.models.openapi import Property, Schema, SchemaNode

    from .context import ConstraintMappingContext, PropertyHandle


class ConstraintSource(Protocol):
    """Defines the contract for reading the constraints declared on a property."""

    def constraints_for(self, handle: "PropertyHandle") -> list["Constraint"]:
        """
        Returns the constraint declarations of a property.

        Args:
            handle: The property to read

        Returns:
            The declarations in declaration order (empty if there are none)
        """
        ...


class SingleConstraintMapper(Protocol):
    """Defines the contract for mapping one constraint kind onto a schema node."""

    def can_map(self, constraint: "Constraint") -> bool:
        """
        Checks whether this mapper can handle the given declaration.

        Args:
            constraint: The constraint declaration

        Returns:
            True if the declaration is supported, False otherwise.
        """
        ...

    def map_constraint(
        self,
        constraint: "Constraint",
        node: "SchemaNode",
        context: "ConstraintMappingContext",
    ) -> None:
        """
        Apply a single constraint declaration to a schema node.

        Args:
            constraint: The declaration to apply
            node: The Property (or Items) node to update
            context: Mapping context giving access to the schema's required-list
                and to nested constraint application
        """
        ...


class PropertyMapper(Protocol):
    """Defines the contract for merging a property's constraints into a schema."""

    def set_schema(self, schema: "Schema") -> None:
        """Bind the schema whose required-list is updated."""
        ...

    def update_property(
        self,
        handle: "PropertyHandle",
        node: "Property",
        validation_groups: Iterable[str] | None = None,
    ) -> None:
        """
        Read every constraint declared on a property and apply them, in
        declaration order, to its node in the bound schema.
        """
        ...

    def register_mapper(self, kind: str, mapper: SingleConstraintMapper) -> None:
        """
        Register a single constraint mapper for a constraint kind.

        Args:
            kind: The constraint kind to handle (e.g., 'Length')
            mapper: The mapper instance that can handle this kind
        """
        ...

    def get_registered_mappers(self) -> dict[str, SingleConstraintMapper]:
        """
        Get all registered mappers.

        Returns:
            Dictionary mapping constraint kinds to their mappers
        """
        ...
