import logging
from collections.abc import Iterable
from io import StringIO
from typing import Any

from pydantic import Field
from ruamel.yaml import YAML

from apidoc_constraints.core.exceptions import PropertyNotFoundError
from apidoc_constraints.utils.sequences import append_unique

from .base_schema import UNSET, Unset
from .property import Property
from .schema_node import SchemaNode

logger = logging.getLogger(__name__)


class Schema(SchemaNode):
    """
    An object schema: an ordered list of properties plus the required-list.

    ``required`` is either UNSET or a dense list of property names without
    duplicates.
    """

    properties: list[Property] = Field(
        default_factory=list,
        description="Properties in declaration order.",
    )
    required: list[str] | Unset = Field(
        default=UNSET,
        description="Names of the properties that must be present.",
    )

    def merge(self, properties: Iterable[Property]) -> "Schema":
        """Appends property nodes, keeping their order."""
        for prop in properties:
            if any(p.property == prop.property for p in self.properties):
                logger.warning(
                    f"Schema already has a property named '{prop.property}'"
                )
            self.properties.append(prop)
        return self

    def get_property(self, name: str) -> Property:
        """
        Looks up a property node by name.

        Raises:
            PropertyNotFoundError: If no property has that name
        """
        for prop in self.properties:
            if prop.property == name:
                return prop
        raise PropertyNotFoundError(f"Schema has no property named '{name}'")

    def has_property(self, name: str) -> bool:
        return any(p.property == name for p in self.properties)

    def mark_required(self, name: str) -> list[str]:
        """
        Adds a property name to the required-list if it is not there yet.

        The list is rebuilt after every insert so it stays dense and
        duplicate-free.
        """
        existing = None if self.required is UNSET else self.required
        self.required = append_unique(existing, name)
        return self.required

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.properties:
            result["properties"] = {p.property: p.to_dict() for p in self.properties}
        else:
            result.pop("properties", None)
        return result

    def to_yaml(self) -> str:
        """Serializes the schema fragment to YAML."""
        yaml = YAML()
        yaml.indent(mapping=2, sequence=4, offset=2)
        yaml.default_flow_style = False
        yaml.allow_unicode = True
        yaml.width = 4096

        stream = StringIO()
        yaml.dump(self.to_dict(), stream)
        return stream.getvalue()
