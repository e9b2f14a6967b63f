"""
LayoutTree - edit nested UI layout descriptions as a tree of components

LayoutTree parses the component tree of a layout document into mutable nodes
that can be navigated by path, edited and moved, then serialized back.
"""

from importlib.metadata import version

from layouttree.core import Component
from layouttree.models import LayoutSettings
from layouttree.parsing import JsLayoutParser, dump_root, parse_root

__version__ = version("layouttree")

__all__ = [
    "__version__",
    "Component",
    "JsLayoutParser",
    "LayoutSettings",
    "dump_root",
    "parse_root",
]
