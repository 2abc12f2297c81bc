from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar

from .base_constraint import Constraint


@dataclass(frozen=True, kw_only=True)
class Choice(Constraint):
    """
    The value must be one of an allowed set of values.

    The set comes from ``choices`` (an ordered collection, a mapping whose
    values are the allowed values, an Enum class, or a zero-argument callable
    returning either) or from ``callback`` (a callable, or the name of a
    callable attribute of the class owning the property). With ``multiple``
    the value is a collection whose members must each be allowed.

    Static choices are copied at construction: sequences and iterables into a
    tuple, mappings into a read-only mapping, Enum classes into the tuple of
    their member values.
    """

    kind: ClassVar[str] = "Choice"

    # Not hashed: Annotated metadata inside unions must stay hashable
    choices: Sequence[Any] | Mapping[Any, Any] | Callable[[], Any] | None = field(
        default=None, hash=False
    )
    callback: Callable[[], Any] | str | None = None
    multiple: bool = False

    def __post_init__(self) -> None:
        super().__post_init__()
        choices = self.choices
        if isinstance(choices, set | frozenset):
            raise ValueError(
                "choices must be an ordered collection (list, tuple or mapping)"
            )
        if isinstance(choices, str | bytes):
            raise ValueError("choices must be a collection, not a single string")

        if isinstance(choices, type) and issubclass(choices, Enum):
            choices = tuple(member.value for member in choices)
        elif isinstance(choices, Mapping):
            choices = MappingProxyType(dict(choices))
        elif choices is not None and not callable(choices):
            choices = tuple(choices)
        object.__setattr__(self, "choices", choices)
