from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Unset(Enum):
    """Marker for a schema field that no constraint has set yet."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


class OpenApiBase(BaseModel):
    """
    Base class for OpenAPI description nodes.

    Optional fields default to UNSET so that "never set" stays distinct from
    an explicit None, zero or empty value.
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Converts the node to an OpenAPI mapping, omitting UNSET fields."""
        result: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is UNSET:
                continue
            result[field.alias or name] = _dump_value(value)
        return result


def _dump_value(value: Any) -> Any:
    if isinstance(value, OpenApiBase):
        return value.to_dict()
    if isinstance(value, list | tuple):
        return [_dump_value(item) for item in value]
    if isinstance(value, dict):
        return {k: _dump_value(v) for k, v in value.items()}
    return value
