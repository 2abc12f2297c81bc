"""Validation plugin: maps validation constraints onto OpenAPI schemas."""

from .describer import ValidationModelDescriber
from .mapper import ValidationConstraintMapper
from .sources import AnnotatedConstraintSource, MappingConstraintSource

__all__ = [
    "AnnotatedConstraintSource",
    "MappingConstraintSource",
    "ValidationConstraintMapper",
    "ValidationModelDescriber",
]
