"""Request/response schemas and view models."""
