"""Core prompt definitions."""
