"""
apidoc_constraints – merge validation constraints into OpenAPI schemas.

Typical use::

    schema = ValidationModelDescriber().describe(User)
    schema.to_dict()
"""

from .core.context import ConstraintMappingContext, MapperSettings, PropertyHandle
from .core.exceptions import (
    ChoiceResolutionError,
    ConstraintMappingError,
    ConstraintSourceError,
    PropertyNotFoundError,
    SchemaNotSetError,
)
from .models.openapi import UNSET, Items, Property, Schema, Unset
from .plugins.validation import (
    AnnotatedConstraintSource,
    MappingConstraintSource,
    ValidationConstraintMapper,
    ValidationModelDescriber,
)

__all__ = [
    "UNSET",
    "Unset",
    "Schema",
    "Property",
    "Items",
    "PropertyHandle",
    "MapperSettings",
    "ConstraintMappingContext",
    "AnnotatedConstraintSource",
    "MappingConstraintSource",
    "ValidationConstraintMapper",
    "ValidationModelDescriber",
    "ConstraintMappingError",
    "SchemaNotSetError",
    "PropertyNotFoundError",
    "ChoiceResolutionError",
    "ConstraintSourceError",
]
