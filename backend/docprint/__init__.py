"""Winnowing-based document fingerprinting and similarity engine."""
