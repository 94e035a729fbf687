"""
People Data Labs tools registry.

This module provides centralized tool registration for the MCP front-ends.
"""
from . import autocomplete, company, person, search
from .base import ToolRegistry


def build_registry() -> ToolRegistry:
    """Build the registry of all tools, in advertised order."""
    return ToolRegistry([
        *person.definitions(),
        *company.definitions(),
        *search.definitions(),
        *autocomplete.definitions(),
    ])


__all__ = ["ToolRegistry", "build_registry"]
