"""
Constraint sources.

Implementations of the ConstraintSource contract: one reading
``typing.Annotated`` metadata off a class, one backed by an explicit registry.
"""

import logging
import types
import typing
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from apidoc_constraints.core.context import PropertyHandle
from apidoc_constraints.core.exceptions import ConstraintSourceError
from apidoc_constraints.models.constraints import Constraint

logger = logging.getLogger(__name__)


class AnnotatedConstraintSource:
    """
    Reads constraint declarations from ``Annotated`` type hints.

    Works for any class whose attributes are annotated: dataclasses, pydantic
    models and plain classes alike::

        class User:
            name: Annotated[str, NotBlank(), Length(max=64)]

    Constraints on the alternatives of a union (``Annotated[...] | None``) are
    collected too; constraints inside generic arguments (``list[Annotated]``)
    describe members and are not.
    """

    def __init__(self) -> None:
        self._logger = logger.getChild(self.__class__.__name__)
        self._hints_cache: dict[type, dict[str, Any]] = {}

    def constraints_for(self, handle: PropertyHandle) -> list[Constraint]:
        hint = self._get_hints(handle.owner).get(handle.name)
        if hint is None:
            self._logger.debug(f"No annotation for '{handle.qualified_name}'")
            return []
        return list(self._collect(hint))

    def _get_hints(self, owner: type) -> dict[str, Any]:
        if owner not in self._hints_cache:
            try:
                self._hints_cache[owner] = typing.get_type_hints(
                    owner, include_extras=True
                )
            except (NameError, TypeError) as e:
                raise ConstraintSourceError(
                    f"Cannot resolve annotations of {owner.__qualname__}: {e}"
                ) from e
        return self._hints_cache[owner]

    def _collect(self, hint: Any) -> Iterator[Constraint]:
        origin = typing.get_origin(hint)

        if origin is typing.Annotated:
            inner, *metadata = typing.get_args(hint)
            yield from self._collect(inner)
            for item in metadata:
                if isinstance(item, Constraint):
                    yield item
        elif origin is typing.Union or origin is types.UnionType:
            for arg in typing.get_args(hint):
                yield from self._collect(arg)


class MappingConstraintSource:
    """
    Serves constraint declarations from an explicit registry.

    Keys are either ``(owner, name)`` pairs or bare property names; a pair
    wins over a bare name.
    """

    def __init__(
        self,
        constraints: (
            Mapping[tuple[type, str] | str, Iterable[Constraint]] | None
        ) = None,
    ) -> None:
        self._constraints: dict[tuple[type, str] | str, list[Constraint]] = {}
        for key, declared in (constraints or {}).items():
            self._constraints[key] = list(declared)

    def add(
        self, owner: type | None, name: str, *constraints: Constraint
    ) -> "MappingConstraintSource":
        """Appends declarations for a property (any owner when owner is None)."""
        key: tuple[type, str] | str = name if owner is None else (owner, name)
        self._constraints.setdefault(key, []).extend(constraints)
        return self

    def constraints_for(self, handle: PropertyHandle) -> list[Constraint]:
        declared = self._constraints.get((handle.owner, handle.name))
        if declared is None:
            declared = self._constraints.get(handle.name, [])
        return list(declared)
