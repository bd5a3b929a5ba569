"""Request and response contracts of the action endpoints."""
