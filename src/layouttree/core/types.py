"""
Core type definitions for layout component trees.

This module contains type aliases used throughout the layout tree library
for type safety and consistency.
"""

from typing import Any

LayoutValue = str | int | float | bool | list | dict | None

AttributeDict = dict[str, Any]

LayoutDict = dict[str, Any]

CHILDREN_KEY = "children"

DEFAULT_SEPARATOR = "."
