"""Unit tests for the NotBlank / NotNull mappers."""

from apidoc_constraints.core.context import ConstraintMappingContext, PropertyHandle
from apidoc_constraints.models.constraints import Length, NotBlank, NotNull
from apidoc_constraints.models.openapi import UNSET, Property, Schema
from apidoc_constraints.plugins.validation.mappers.required import (
    NotBlankMapper,
    NotNullMapper,
)


class Owner:
    pass


def _context(schema: Schema, name: str) -> ConstraintMappingContext:
    return ConstraintMappingContext(
        schema=schema, handle=PropertyHandle(Owner, name), property_name=name
    )


class TestCanMap:
    def test_not_blank(self) -> None:
        m = NotBlankMapper()
        assert m.can_map(NotBlank()) is True
        assert m.can_map(NotBlank(allow_null=True)) is False
        assert m.can_map(NotNull()) is False
        assert m.can_map(Length(min=1)) is False

    def test_not_null(self) -> None:
        m = NotNullMapper()
        assert m.can_map(NotNull()) is True
        assert m.can_map(NotBlank()) is False


class TestMap:
    def test_marks_required_once(self) -> None:
        schema = Schema()
        node = Property(property="a")
        ctx = _context(schema, "a")
        NotBlankMapper().map_constraint(NotBlank(), node, ctx)
        NotNullMapper().map_constraint(NotNull(), node, ctx)
        assert schema.required == ["a"]

    def test_node_is_not_touched(self) -> None:
        schema = Schema()
        node = Property(property="a")
        NotBlankMapper().map_constraint(NotBlank(), node, _context(schema, "a"))
        assert node.to_dict() == {}
        assert node.nullable is UNSET

    def test_appends_after_existing_names(self) -> None:
        schema = Schema(required=["x"])
        NotNullMapper().map_constraint(
            NotNull(), Property(property="y"), _context(schema, "y")
        )
        assert schema.required == ["x", "y"]
