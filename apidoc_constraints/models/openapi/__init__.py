from .base_schema import UNSET, OpenApiBase, Unset
from .property import Property
from .schema import Schema
from .schema_node import Items, SchemaNode

__all__ = [
    "UNSET",
    "Unset",
    "OpenApiBase",
    "SchemaNode",
    "Items",
    "Property",
    "Schema",
]
