from dataclasses import dataclass
from typing import ClassVar

DEFAULT_GROUP = "Default"


@dataclass(frozen=True, kw_only=True)
class Constraint:
    """
    Base class for validation constraint declarations.

    Declarations are immutable values. Each subclass names its ``kind``, the key
    under which a mapping strategy is registered.

    Declarations may sit in the ``Annotated`` metadata of pydantic fields, so
    they must not define ``__get_pydantic_core_schema__``.
    """

    kind: ClassVar[str] = "Constraint"

    # Validation groups the constraint belongs to
    groups: tuple[str, ...] = (DEFAULT_GROUP,)

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", tuple(self.groups))
        if not self.groups:
            raise ValueError("a constraint must belong to at least one group")

    def applies_to(self, groups: tuple[str, ...] | list[str]) -> bool:
        """Whether the constraint belongs to any of the given groups."""
        return bool(set(self.groups) & set(groups))


@dataclass(frozen=True, kw_only=True)
class BoundedConstraint(Constraint):
    """A constraint with an optional lower and an optional upper bound."""

    min: int | float | None = None
    max: int | float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        # a bound left out stays None; at least one must be declared
        if self.min is None and self.max is None:
            raise ValueError(f"{self.kind} requires at least one of 'min' or 'max'")
