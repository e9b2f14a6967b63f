"""
Layout tree exception classes.

This package provides all exception types used throughout the layout tree
library for consistent error handling and reporting.
"""

from layouttree.exceptions.core import (
    CyclicMoveError,
    DuplicateChildError,
    LayoutDocumentError,
    LayoutTreeError,
    MissingChildError,
    PathNotFoundError,
    PathValidationError,
    ReservedAttributeError,
    RootNotFoundError,
)

__all__ = [
    "LayoutTreeError",
    "DuplicateChildError",
    "MissingChildError",
    "PathNotFoundError",
    "RootNotFoundError",
    "CyclicMoveError",
    "ReservedAttributeError",
    "PathValidationError",
    "LayoutDocumentError",
]
