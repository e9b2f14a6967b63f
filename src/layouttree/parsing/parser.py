"""
Layout document adapter.

A layout document keeps its component trees under a top-level `components`
mapping, keyed by root component name. Other top-level keys (such as
`types`) are not component trees and pass through untouched. This module
locates a root in such a document, builds the `Component` tree for it, and
writes an edited tree back into a copy of the document.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from layouttree.core.component import Component
from layouttree.core.types import LayoutDict
from layouttree.exceptions import LayoutDocumentError, RootNotFoundError
from layouttree.models import DEFAULT_SETTINGS, LayoutSettings

logger = logging.getLogger(__name__)


class JsLayoutDocument(BaseModel):
    """Shape check for the outer layout document."""

    model_config = ConfigDict(extra="allow")

    components: dict[str, Any]


class JsLayoutParser:
    """Builds component trees from layout documents and writes them back.

    Stateless apart from its settings; a single instance can be shared.
    """

    def __init__(self, settings: LayoutSettings | None = None):
        self.settings = settings or DEFAULT_SETTINGS

    def _validate(self, js_layout: Mapping[str, Any]) -> JsLayoutDocument:
        key = self.settings.components_key
        if not isinstance(js_layout, Mapping):
            raise LayoutDocumentError(
                f"expected a mapping, got {type(js_layout).__name__}"
            )
        if key not in js_layout:
            raise LayoutDocumentError(f"missing '{key}' mapping")

        try:
            return JsLayoutDocument.model_validate({"components": js_layout[key]})
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(loc) for loc in error['loc'][1:]) or key}: {error['msg']}"
                for error in e.errors()
            )
            raise LayoutDocumentError(f"invalid '{key}' mapping ({details})") from e

    def parse(self, js_layout: Mapping[str, Any], root_name: str) -> Component:
        """
        Build the component tree for one root of a layout document.

        Params:
            js_layout: Layout document with a components mapping
            root_name: Name of the root component to build

        Returns:
            Root component with its whole subtree materialized

        Raises:
            LayoutDocumentError: If the document does not have the expected shape
            RootNotFoundError: If root_name is not among the document's components
        """
        document = self._validate(js_layout)
        if root_name not in document.components:
            raise RootNotFoundError(root_name, list(document.components))

        root_data = document.components[root_name]
        if not isinstance(root_data, Mapping):
            raise LayoutDocumentError(
                f"root component '{root_name}' must be a mapping, "
                f"got {type(root_data).__name__}"
            )

        root = Component(root_name, root_data)
        logger.debug(
            "Parsed root component '%s' with %d descendants",
            root_name,
            sum(1 for _ in root.iter_descendants()),
        )
        return root

    def dump(self, js_layout: Mapping[str, Any], component: Component) -> LayoutDict:
        """
        Write a component tree back into a copy of a layout document.

        The tree replaces `components[component.name]`; every other part of
        the document is copied unchanged. The input document is not modified.

        Params:
            js_layout: Layout document the tree was parsed from
            component: Root component to embed

        Returns:
            New layout document containing the serialized tree

        Raises:
            LayoutDocumentError: If the document does not have the expected shape
        """
        self._validate(js_layout)
        result = copy.deepcopy(dict(js_layout))
        result[self.settings.components_key][component.name] = component.as_dict()
        return result

    def get_component(self, root: Component, path: str) -> Component | None:
        """Resolve a nested component using the configured path separator."""
        return root.get_nested_child(path, self.settings.path_separator)


def parse_root(
    js_layout: Mapping[str, Any],
    root_name: str,
    settings: LayoutSettings | None = None,
) -> Component:
    """Build the component tree for `root_name`; see `JsLayoutParser.parse`.

    Hold on to the returned root while editing its subtree. Parent links are
    weak, so a chained `parse_root(...).get_nested_child(path)` leaves the
    result without ancestors, and `remove()` on it has nothing to detach from.
    """
    return JsLayoutParser(settings).parse(js_layout, root_name)


def dump_root(
    js_layout: Mapping[str, Any],
    component: Component,
    settings: LayoutSettings | None = None,
) -> LayoutDict:
    """Embed `component` into a copy of `js_layout`; see `JsLayoutParser.dump`."""
    return JsLayoutParser(settings).dump(js_layout, component)
