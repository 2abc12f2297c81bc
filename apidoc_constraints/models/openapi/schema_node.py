from typing import Any

from pydantic import Field

from .base_schema import UNSET, OpenApiBase, Unset


class SchemaNode(OpenApiBase):
    """
    Keywords shared by every OpenAPI schema node (schema, property, items).

    Only the keywords that constraint declarations can influence are modelled.
    """

    type: str | Unset = Field(default=UNSET, description="Primitive type name.")
    format: str | Unset = Field(default=UNSET, description="Type format hint.")
    description: str | Unset = Field(default=UNSET)
    nullable: bool | Unset = Field(
        default=UNSET, description="Whether null is an accepted value."
    )
    min_length: int | Unset = Field(default=UNSET, alias="minLength")
    max_length: int | Unset = Field(default=UNSET, alias="maxLength")
    pattern: str | Unset = Field(
        default=UNSET,
        description=(
            "Regular expression the value must match. Several patterns are "
            "joined with ', '."
        ),
    )
    minimum: int | float | Unset = Field(default=UNSET)
    maximum: int | float | Unset = Field(default=UNSET)
    exclusive_minimum: bool | Unset = Field(default=UNSET, alias="exclusiveMinimum")
    exclusive_maximum: bool | Unset = Field(default=UNSET, alias="exclusiveMaximum")
    min_items: int | Unset = Field(default=UNSET, alias="minItems")
    max_items: int | Unset = Field(default=UNSET, alias="maxItems")
    enum: list[Any] | Unset = Field(
        default=UNSET, description="Dense ordered list of allowed values."
    )
    items: "Items | Unset" = Field(
        default=UNSET,
        description="Schema of the members when the node describes a collection.",
    )

    def ensure_items(self) -> "Items":
        """Returns the owned Items node, creating it on first use."""
        if self.items is UNSET:
            self.items = Items()
        return self.items


class Items(SchemaNode):
    """Describes the members of a collection-valued node."""

    pass


SchemaNode.model_rebuild()
Items.model_rebuild()
