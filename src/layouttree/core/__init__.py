"""
Core layout tree components.

This package provides the component tree node together with the path
helpers and type definitions it is built on.
"""

from layouttree.core.component import Component
from layouttree.core.path_utils import (
    join_component_path,
    split_component_path,
    validate_separator,
)
from layouttree.core.types import (
    CHILDREN_KEY,
    DEFAULT_SEPARATOR,
    AttributeDict,
    LayoutDict,
    LayoutValue,
)

__all__ = [
    "Component",
    "LayoutValue",
    "AttributeDict",
    "LayoutDict",
    "CHILDREN_KEY",
    "DEFAULT_SEPARATOR",
    "join_component_path",
    "split_component_path",
    "validate_separator",
]
