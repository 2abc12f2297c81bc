"""Value objects: OpenAPI schema nodes and constraint declarations."""
