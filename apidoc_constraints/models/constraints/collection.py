from dataclasses import dataclass
from typing import ClassVar

from .base_constraint import Constraint


@dataclass(frozen=True, kw_only=True)
class All(Constraint):
    """Applies nested constraints to every member of a collection value."""

    kind: ClassVar[str] = "All"

    constraints: tuple[Constraint, ...]

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "constraints", tuple(self.constraints))
        if not self.constraints:
            raise ValueError("All requires at least one nested constraint")
        for nested in self.constraints:
            if not isinstance(nested, Constraint):
                raise TypeError(
                    f"All accepts constraint declarations, got {type(nested).__name__}"
                )
