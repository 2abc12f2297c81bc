"""
Constraint Mapping Exception Classes

Custom exceptions raised while mapping constraint declarations onto a schema.
"""


class ConstraintMappingError(Exception):
    """Base exception for all constraint mapping errors."""

    pass


class SchemaNotSetError(ConstraintMappingError):
    """Raised when a property is updated before a schema has been bound."""

    pass


class PropertyNotFoundError(ConstraintMappingError, KeyError):
    """Raised when a schema has no property with the requested name."""

    pass


class ChoiceResolutionError(ConstraintMappingError):
    """Raised when the value set of a Choice constraint cannot be obtained."""

    pass


class ConstraintSourceError(ConstraintMappingError):
    """Raised when an annotation source cannot read a property's constraints."""

    pass
