from dataclasses import dataclass
from typing import ClassVar

from .base_constraint import BoundedConstraint


@dataclass(frozen=True, kw_only=True)
class _NonNegativeBounds(BoundedConstraint):
    min: int | None = None
    max: int | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        for bound in (self.min, self.max):
            if bound is not None and bound < 0:
                raise ValueError(f"{self.kind} bounds must not be negative")


@dataclass(frozen=True, kw_only=True)
class Length(_NonNegativeBounds):
    """Bounds the length of a string value."""

    kind: ClassVar[str] = "Length"


@dataclass(frozen=True, kw_only=True)
class Count(_NonNegativeBounds):
    """Bounds the number of members of a collection value."""

    kind: ClassVar[str] = "Count"
