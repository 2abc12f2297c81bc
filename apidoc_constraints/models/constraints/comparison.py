from dataclasses import dataclass
from typing import ClassVar

from .base_constraint import BoundedConstraint, Constraint


@dataclass(frozen=True, kw_only=True)
class Range(BoundedConstraint):
    """The numeric value must lie between ``min`` and ``max`` (inclusive)."""

    kind: ClassVar[str] = "Range"


@dataclass(frozen=True, kw_only=True)
class ComparisonConstraint(Constraint):
    """Compares the value against a fixed reference value."""

    value: int | float


@dataclass(frozen=True, kw_only=True)
class LessThan(ComparisonConstraint):
    kind: ClassVar[str] = "LessThan"


@dataclass(frozen=True, kw_only=True)
class LessThanOrEqual(ComparisonConstraint):
    kind: ClassVar[str] = "LessThanOrEqual"


@dataclass(frozen=True, kw_only=True)
class GreaterThan(ComparisonConstraint):
    kind: ClassVar[str] = "GreaterThan"


@dataclass(frozen=True, kw_only=True)
class GreaterThanOrEqual(ComparisonConstraint):
    kind: ClassVar[str] = "GreaterThanOrEqual"
