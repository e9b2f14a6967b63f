"""
Layout document parsing.

This package adapts whole layout documents to component trees: it locates a
root component, builds its tree, and embeds edited trees back.
"""

from layouttree.parsing.parser import (
    JsLayoutDocument,
    JsLayoutParser,
    dump_root,
    parse_root,
)

__all__ = [
    "JsLayoutDocument",
    "JsLayoutParser",
    "dump_root",
    "parse_root",
]
