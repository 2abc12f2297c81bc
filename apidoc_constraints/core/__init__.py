"""Mapping engine contracts, context objects and exceptions."""
