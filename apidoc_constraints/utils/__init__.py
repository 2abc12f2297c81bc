"""Small helpers shared across the package."""

from .sequences import append_unique, dense_values

__all__ = ["append_unique", "dense_values"]
