"""
Path utilities for nested component lookup.

Nested components are addressed by joining child names with a separator,
e.g. "steps.shipping-step.shippingAddress". This module keeps the splitting
and joining rules in one place so every path operation agrees on them.
"""

from layouttree.core.types import DEFAULT_SEPARATOR
from layouttree.exceptions import PathValidationError


def validate_separator(separator: str, path: str = "") -> None:
    """
    Validate a path separator.

    Params:
        separator: Separator to validate
        path: Path the separator is used with, for error messages

    Raises:
        PathValidationError: If separator is not a non-empty string
    """
    if not separator or not isinstance(separator, str):
        raise PathValidationError(path, "separator must be a non-empty string")


def split_component_path(path: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """
    Split a nested path into the ordered list of component names.

    Every segment is kept, including empty ones, so "a..b" yields
    ["a", "", "b"] and simply fails to resolve unless such children exist.

    Params:
        path: Path string to split
        separator: Separator between component names

    Returns:
        List of component names from outermost to innermost

    Raises:
        PathValidationError: If separator is empty
    """
    validate_separator(separator, path)
    return path.split(separator)


def join_component_path(names: list[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Join component names into a nested path.

    Params:
        names: Component names from outermost to innermost
        separator: Separator between component names

    Returns:
        The joined path string
    """
    validate_separator(separator, "")
    return separator.join(names)
