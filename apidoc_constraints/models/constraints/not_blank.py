from dataclasses import dataclass
from typing import ClassVar

from .base_constraint import Constraint


@dataclass(frozen=True, kw_only=True)
class NotBlank(Constraint):
    """The value must not be blank (empty string, empty collection or None)."""

    kind: ClassVar[str] = "NotBlank"

    # Accept None while still rejecting empty values
    allow_null: bool = False


@dataclass(frozen=True, kw_only=True)
class NotNull(Constraint):
    """The value must not be None."""

    kind: ClassVar[str] = "NotNull"
