"""API layer: app factory and non-action routes."""
