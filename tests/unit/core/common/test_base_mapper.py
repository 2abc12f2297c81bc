"""Unit tests for BaseConstraintMapper abstract class."""

from __future__ import annotations

import logging
from typing import ClassVar

import pytest

from apidoc_constraints.core.common.base_mapper import BaseConstraintMapper
from apidoc_constraints.core.context import (
    ConstraintMappingContext,
    MapperSettings,
    PropertyHandle,
)
from apidoc_constraints.core.exceptions import SchemaNotSetError
from apidoc_constraints.models.constraints import Constraint, Length, NotBlank
from apidoc_constraints.models.openapi import Property, Schema, SchemaNode

# -------------------- Fakes / helpers --------------------


class Owner:
    """Class whose properties the fake source describes."""


class Unknown(Constraint):
    kind: ClassVar[str] = "Unknown"


class FakeSingleConstraintMapper:
    """Configurable SingleConstraintMapper fake."""

    def __init__(self, can_map_result: bool = True, raise_on_map: bool = False):
        self.can_map_result = can_map_result
        self.raise_on_map = raise_on_map
        self.calls: list[tuple[Constraint, SchemaNode, ConstraintMappingContext]] = []

    def can_map(self, constraint: Constraint) -> bool:
        return self.can_map_result

    def map_constraint(
        self,
        constraint: Constraint,
        node: SchemaNode,
        context: ConstraintMappingContext,
    ) -> None:
        if self.raise_on_map:
            raise ValueError("mapper boom")
        self.calls.append((constraint, node, context))


class ConcreteConstraintMapper(BaseConstraintMapper):
    """Concrete mapper that reads constraints from a dict keyed by name."""

    def __init__(
        self,
        declared: dict[str, list[Constraint]] | None = None,
        settings: MapperSettings | None = None,
    ):
        super().__init__(settings)
        self.declared = declared or {}

    def _extract_constraints(self, handle: PropertyHandle):
        return self.declared.get(handle.name, [])


class RaisingExtractConstraintMapper(BaseConstraintMapper):
    """Mapper whose extractor raises for error-path tests."""

    def _extract_constraints(self, handle: PropertyHandle):
        raise RuntimeError("extract boom")


def _schema(*names: str) -> Schema:
    schema = Schema()
    schema.merge([Property(property=n) for n in names])
    return schema


# --------------------------- Tests ---------------------------


class TestRegistry:
    def test_register_and_get_registered_mappers(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        cm = ConcreteConstraintMapper()
        m1 = FakeSingleConstraintMapper()
        cm.register_mapper("Length", m1)
        regs = cm.get_registered_mappers()
        assert regs["Length"] is m1
        # log info about registration
        assert any("Registering mapper" in r.message for r in caplog.records)

    def test_register_by_constraint_class(self) -> None:
        cm = ConcreteConstraintMapper()
        m1 = FakeSingleConstraintMapper()
        cm.register_mapper(NotBlank, m1)
        assert cm.get_registered_mappers()["NotBlank"] is m1

    def test_register_overwrite_logs_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING)
        cm = ConcreteConstraintMapper()
        cm.register_mapper("Length", FakeSingleConstraintMapper())
        cm.register_mapper("Length", FakeSingleConstraintMapper())
        assert any("Overwriting mapper" in r.message for r in caplog.records)


class TestSchemaBinding:
    def test_update_without_schema_raises(self) -> None:
        cm = ConcreteConstraintMapper({"a": [NotBlank()]})
        with pytest.raises(SchemaNotSetError):
            cm.update_property(PropertyHandle(Owner, "a"), Property(property="a"))

    def test_set_schema(self) -> None:
        cm = ConcreteConstraintMapper()
        schema = _schema("a")
        cm.set_schema(schema)
        assert cm.schema is schema


class TestMappingFlow:
    def test_delegates_in_declaration_order(self) -> None:
        first, second = Length(min=1), NotBlank()
        cm = ConcreteConstraintMapper({"a": [first, second]})
        m_len = FakeSingleConstraintMapper()
        m_blank = FakeSingleConstraintMapper()
        cm.register_mapper("Length", m_len)
        cm.register_mapper("NotBlank", m_blank)

        schema = _schema("a")
        cm.set_schema(schema)
        node = schema.get_property("a")
        cm.update_property(PropertyHandle(Owner, "a"), node)

        assert [c[0] for c in m_len.calls] == [first]
        assert [c[0] for c in m_blank.calls] == [second]
        constraint, target, context = m_len.calls[0]
        assert target is node
        assert context.schema is schema
        assert context.property_name == "a"
        assert context.handle == PropertyHandle(Owner, "a")
        assert context.nested is False

    def test_property_name_comes_from_node(self) -> None:
        cm = ConcreteConstraintMapper({"py_name": [NotBlank()]})
        m = FakeSingleConstraintMapper()
        cm.register_mapper("NotBlank", m)
        schema = _schema("jsonName")
        cm.set_schema(schema)
        cm.update_property(
            PropertyHandle(Owner, "py_name"), schema.get_property("jsonName")
        )
        assert m.calls[0][2].property_name == "jsonName"

    def test_skips_unknown_kind_without_error(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG)
        cm = ConcreteConstraintMapper({"a": [Unknown(), Length(max=3)]})
        m_len = FakeSingleConstraintMapper()
        cm.register_mapper("Length", m_len)
        schema = _schema("a")
        cm.set_schema(schema)
        node = schema.get_property("a")
        before = node.to_dict()

        cm.update_property(PropertyHandle(Owner, "a"), node)

        assert len(m_len.calls) == 1
        assert node.to_dict() == before
        assert any("No mapper registered" in r.message for r in caplog.records)

    def test_skips_when_can_map_false(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG)
        cm = ConcreteConstraintMapper({"a": [NotBlank(allow_null=True)]})
        m = FakeSingleConstraintMapper(can_map_result=False)
        cm.register_mapper("NotBlank", m)
        schema = _schema("a")
        cm.set_schema(schema)
        cm.update_property(PropertyHandle(Owner, "a"), schema.get_property("a"))
        assert m.calls == []
        assert any("does not apply" in r.message for r in caplog.records)

    def test_no_constraints_is_a_no_op(self) -> None:
        cm = ConcreteConstraintMapper()
        cm.register_mapper("NotBlank", FakeSingleConstraintMapper())
        schema = _schema("a")
        cm.set_schema(schema)
        cm.update_property(PropertyHandle(Owner, "a"), schema.get_property("a"))
        assert schema.to_dict() == {"properties": {"a": {}}}

    def test_exception_bubbles_when_extract_raises(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.ERROR)
        cm = RaisingExtractConstraintMapper()
        schema = _schema("a")
        cm.set_schema(schema)
        with pytest.raises(RuntimeError, match="extract boom"):
            cm.update_property(PropertyHandle(Owner, "a"), schema.get_property("a"))
        assert any(
            "Failed to map constraints" in r.message for r in caplog.records
        )

    def test_exception_bubbles_when_strategy_raises(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.ERROR)
        cm = ConcreteConstraintMapper({"a": [NotBlank()]})
        # mapper raises during map_constraint
        cm.register_mapper("NotBlank", FakeSingleConstraintMapper(raise_on_map=True))
        schema = _schema("a")
        cm.set_schema(schema)
        with pytest.raises(ValueError, match="mapper boom"):
            cm.update_property(PropertyHandle(Owner, "a"), schema.get_property("a"))
        assert any(
            "Failed to map constraints" in r.message for r in caplog.records
        )


class TestValidationGroups:
    def _mapper(self, settings: MapperSettings) -> tuple[
        ConcreteConstraintMapper, FakeSingleConstraintMapper
    ]:
        cm = ConcreteConstraintMapper(
            {
                "a": [
                    Length(min=1),
                    Length(max=5, groups=("create",)),
                    Length(max=9, groups=("Default", "update")),
                ]
            },
            settings=settings,
        )
        m = FakeSingleConstraintMapper()
        cm.register_mapper("Length", m)
        cm.set_schema(_schema("a"))
        return cm, m

    def test_groups_ignored_when_disabled(self) -> None:
        cm, m = self._mapper(MapperSettings())
        cm.update_property(
            PropertyHandle(Owner, "a"), Property(property="a"), ["create"]
        )
        assert len(m.calls) == 3
        assert m.calls[0][2].validation_groups is None

    def test_default_groups_when_enabled(self) -> None:
        cm, m = self._mapper(MapperSettings(use_validation_groups=True))
        cm.update_property(PropertyHandle(Owner, "a"), Property(property="a"))
        assert [c[0].max for c in m.calls] == [None, 9]

    def test_requested_groups_filter(self) -> None:
        cm, m = self._mapper(MapperSettings(use_validation_groups=True))
        cm.update_property(
            PropertyHandle(Owner, "a"), Property(property="a"), ["create"]
        )
        assert [c[0].max for c in m.calls] == [5]
