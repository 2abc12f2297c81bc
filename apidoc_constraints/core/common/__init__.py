"""Common base classes for core functionality."""

from .base_describer import BaseModelDescriber
from .base_mapper import BaseConstraintMapper

__all__ = ["BaseConstraintMapper", "BaseModelDescriber"]
