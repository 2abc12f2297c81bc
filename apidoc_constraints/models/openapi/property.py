from pydantic import Field

from .schema_node import SchemaNode


class Property(SchemaNode):
    """A named property of an object schema."""

    property: str = Field(
        ..., description="Name of the property inside the owning schema."
    )

    def to_dict(self):
        # The name is the key in the parent's "properties" map, not a keyword.
        result = super().to_dict()
        result.pop("property", None)
        return result
