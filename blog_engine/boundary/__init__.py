"""Boundary adapters for external tools."""
