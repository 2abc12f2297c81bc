"""Base implementation for model describers."""

import dataclasses
import logging
import typing
from abc import ABC, abstractmethod
from collections.abc import Iterable

from apidoc_constraints.models.openapi import Property, Schema

from ..context import PropertyHandle
from ..exceptions import ConstraintSourceError
from ..protocols import PropertyMapper

logger = logging.getLogger(__name__)


class BaseModelDescriber(ABC):
    """
    Abstract base class for model describers.

    Builds the schema of one class and runs the constraint mapper over each of
    its properties, keeping the choice of mapper abstract.

    Subclasses must implement:
    - get_mapper(): Return the constraint mapper to use

    Subclasses can optionally override:
    - find_properties(): Custom property discovery
    - create_schema(): Custom schema creation
    """

    def __init__(self):
        """Initialize the describer."""
        self._logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def get_mapper(self) -> PropertyMapper:
        """
        Get the constraint mapper for this describer.

        Returns:
            The mapper instance
        """
        pass

    def describe(
        self,
        owner: type,
        property_names: Iterable[str] | None = None,
        validation_groups: Iterable[str] | None = None,
    ) -> Schema:
        """
        Describes a class as an object schema.

        1. Find the properties to describe
        2. Create the schema with one Property node per property
        3. Apply each property's constraints to its node

        Args:
            owner: The class to describe
            property_names: Properties to describe, in order (default: every
                annotated attribute, in declaration order)
            validation_groups: Groups forwarded to the mapper

        Returns:
            The populated schema
        """
        self._logger.info(f"Describing model: {owner.__qualname__}")

        try:
            names = (
                list(property_names)
                if property_names is not None
                else self.find_properties(owner)
            )
            unique_names = list(dict.fromkeys(names))
            if len(unique_names) != len(names):
                self._logger.warning(
                    f"Duplicate property names for {owner.__qualname__} "
                    "were described once"
                )
                names = unique_names
            schema = self.create_schema(owner)
            schema.merge(Property(property=name) for name in names)

            mapper = self.get_mapper()
            mapper.set_schema(schema)
            for name in names:
                mapper.update_property(
                    PropertyHandle(owner=owner, name=name),
                    schema.get_property(name),
                    validation_groups,
                )

            self._logger.info(
                f"Described {len(names)} properties of {owner.__qualname__}"
            )
            return schema

        except Exception as e:
            self._logger.error(f"Describing {owner.__qualname__} failed: {e}")
            raise

    def find_properties(self, owner: type) -> list[str]:
        """
        Find the public properties of a class, in declaration order.

        Pydantic models are read from ``model_fields``, dataclasses from
        their fields, anything else from its annotations. ClassVars and
        private names are left out.

        Raises:
            ConstraintSourceError: If the annotations cannot be resolved
        """
        model_fields = getattr(owner, "model_fields", None)
        if isinstance(model_fields, dict):
            return [name for name in model_fields if not name.startswith("_")]

        if dataclasses.is_dataclass(owner):
            return [
                f.name for f in dataclasses.fields(owner) if not f.name.startswith("_")
            ]

        try:
            hints = typing.get_type_hints(owner)
        except (NameError, TypeError) as e:
            raise ConstraintSourceError(
                f"Cannot resolve annotations of {owner.__qualname__}: {e}"
            ) from e

        return [
            name
            for name, hint in hints.items()
            if not name.startswith("_")
            and typing.get_origin(hint) is not typing.ClassVar
        ]

    def create_schema(self, owner: type) -> Schema:
        """
        Create the (empty) schema for a class.

        Subclasses can override this method to customize schema creation.
        """
        return Schema(type="object")
