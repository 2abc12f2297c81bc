from .base_constraint import DEFAULT_GROUP, BoundedConstraint, Constraint
from .choice import Choice
from .collection import All
from .comparison import (
    ComparisonConstraint,
    GreaterThan,
    GreaterThanOrEqual,
    LessThan,
    LessThanOrEqual,
    Range,
)
from .length import Count, Length
from .not_blank import NotBlank, NotNull
from .regex import Regex

__all__ = [
    "DEFAULT_GROUP",
    "Constraint",
    "BoundedConstraint",
    "ComparisonConstraint",
    "NotBlank",
    "NotNull",
    "Length",
    "Count",
    "Range",
    "LessThan",
    "LessThanOrEqual",
    "GreaterThan",
    "GreaterThanOrEqual",
    "Regex",
    "Choice",
    "All",
]
