"""
Component tree node for layout descriptions.

A layout description is a nested mapping in which every component may hold
a `children` mapping of further components. `Component` materializes that
nesting into live nodes that can be navigated by dotted path, edited, moved
between parents and serialized back into the original nested shape.
"""

import copy
import logging
import weakref
from collections.abc import Iterator, Mapping
from typing import Any, Optional

from layouttree.core.path_utils import join_component_path, split_component_path
from layouttree.core.types import (
    CHILDREN_KEY,
    DEFAULT_SEPARATOR,
    AttributeDict,
    LayoutDict,
    LayoutValue,
)
from layouttree.exceptions import (
    CyclicMoveError,
    DuplicateChildError,
    LayoutDocumentError,
    MissingChildError,
    PathNotFoundError,
    ReservedAttributeError,
)

logger = logging.getLogger(__name__)


class Component:
    """Named node in a layout component tree.

    Each component owns an ordered mapping of child components and an open
    attribute mapping holding everything else (`component`, `config`,
    `dataScope`, and any key this class does not interpret). Unknown keys are
    preserved verbatim through `as_dict()`.

    The parent link is a weak reference: a parent owns its children, never
    the other way round. Detaching a component clears its parent link. Keep
    a reference to the root while working on a subtree: a component whose
    ancestors were garbage-collected reports no parent, so `remove()` on it
    does nothing.

    Responsibilities:
    - Build the child subtree recursively from the `children` attribute
    - Resolve nested children by separator-joined paths
    - Keep parent links and children maps consistent on add/remove/move
    - Serialize back into the nested mapping it was built from
    """

    def __init__(
        self,
        name: str,
        data: Mapping[str, Any] | None = None,
        parent: Optional["Component"] = None,
    ):
        """
        Create a component and recursively build its children.

        The given mapping is copied, so later edits never leak into the
        caller's document.

        Params:
            name: Component name, unique among its siblings
            data: Attribute mapping, optionally with a `children` mapping
            parent: Component to attach the new node to, via `add_child`

        Raises:
            LayoutDocumentError: If `children` is present but neither a mapping
                nor an empty sequence
            DuplicateChildError: If `parent` already has a child with this name,
                or two child keys collapse to the same name
        """
        self._name = str(name)
        self._parent_ref: weakref.ReferenceType["Component"] | None = None
        self._children: dict[str, Component] = {}
        # empty container emitted for a childless node whose source had `children`
        self._empty_children: dict | list | None = None

        attributes = dict(data or {})
        children_data = attributes.pop(CHILDREN_KEY, None)
        self._data: AttributeDict = copy.deepcopy(attributes)

        self._build(children_data)

        if parent is not None:
            parent.add_child(self)

    def _build(self, children_data: Any) -> None:
        if children_data is None:
            return
        if isinstance(children_data, (list, tuple)) and not children_data:
            # JSON-encoded PHP layouts write an empty children array as []
            self._empty_children = []
            return
        if not isinstance(children_data, Mapping):
            raise LayoutDocumentError(
                f"'{CHILDREN_KEY}' of component '{self._name}' must be a mapping, "
                f"got {type(children_data).__name__}"
            )
        self._empty_children = {}
        for child_name, child_data in children_data.items():
            if not isinstance(child_data, Mapping):
                raise LayoutDocumentError(
                    f"child '{child_name}' of component '{self._name}' must be a mapping, "
                    f"got {type(child_data).__name__}"
                )
            name = str(child_name)
            if name in self._children:
                raise DuplicateChildError(name, self._name)
            child = Component(name, child_data)
            child._set_parent(self)
            self._children[name] = child

    def __repr__(self) -> str:
        return f"Component(name={self._name!r}, children={len(self._children)})"

    def __bool__(self) -> bool:
        # a leaf has len() == 0 but still exists
        return True

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator["Component"]:
        return iter(list(self._children.values()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_child(name)

    # Identity and hierarchy

    @property
    def name(self) -> str:
        """Component name, unique among its siblings."""
        return self._name

    @property
    def parent(self) -> Optional["Component"]:
        """Enclosing component, or None for a root or detached component."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def _set_parent(self, parent: Optional["Component"]) -> None:
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    def get_component_name(self) -> str:
        return self._name

    def get_parent(self) -> Optional["Component"]:
        return self.parent

    def get_root(self) -> "Component":
        """Return the topmost component reachable through parent links."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def get_path(self, separator: str = DEFAULT_SEPARATOR) -> str:
        """
        Build the path of this component relative to its root.

        The root itself has an empty path. For any attached component,
        `component.get_root().get_nested_child(component.get_path())` returns
        the component itself.

        Params:
            separator: Separator between component names

        Returns:
            Separator-joined names from the root's child down to this component
        """
        names = []
        node = self
        while node.parent is not None:
            names.append(node.name)
            node = node.parent
        return join_component_path(list(reversed(names)), separator)

    def is_child_of(self, component: "Component") -> bool:
        """Check whether `component` is this component's current parent."""
        return self.parent is component

    def _is_ancestor_of(self, component: "Component") -> bool:
        node: Component | None = component
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    # Direct children

    def has_child(self, name: str) -> bool:
        return name in self._children

    def get_child(self, name: str) -> Optional["Component"]:
        return self._children.get(name)

    def has_children(self) -> bool:
        return len(self._children) > 0

    def get_children(self) -> list["Component"]:
        """Return direct children in insertion order."""
        return list(self._children.values())

    def iter_descendants(self) -> Iterator["Component"]:
        """Yield all descendants depth-first, parents before their children."""
        for child in self.get_children():
            yield child
            yield from child.iter_descendants()

    def add_child(self, component: "Component") -> "Component":
        """
        Attach a component as the last child of this component.

        A component that is currently attached elsewhere is detached from its
        old parent first, so it is never reachable from two parents. All checks
        run before anything is changed.

        Params:
            component: Component to attach

        Returns:
            This component, for chaining

        Raises:
            DuplicateChildError: If a child with the same name already exists
            CyclicMoveError: If `component` is this component or one of its ancestors
        """
        if self.has_child(component.name):
            raise DuplicateChildError(component.name, self._name)
        if component._is_ancestor_of(self):
            raise CyclicMoveError(component.name, self._name)

        old_parent = component.parent
        if old_parent is not None:
            old_parent._detach(component.name)

        self._children[component.name] = component
        component._set_parent(self)
        logger.debug("Added component '%s' to '%s'", component.name, self._name)
        return self

    def remove_child(self, name: str) -> "Component":
        """
        Detach a direct child.

        The detached child keeps its own subtree and has its parent link
        cleared.

        Params:
            name: Name of the child to remove

        Returns:
            This component, for chaining

        Raises:
            MissingChildError: If there is no child with that name
        """
        if not self.has_child(name):
            raise MissingChildError(name, self._name)
        self._detach(name)
        logger.debug("Removed component '%s' from '%s'", name, self._name)
        return self

    def _detach(self, name: str) -> "Component":
        child = self._children.pop(name)
        child._set_parent(None)
        return child

    def remove(self) -> None:
        """Detach this component from its parent; no-op for a root."""
        parent = self.parent
        if parent is not None:
            parent.remove_child(self._name)

    # Nested children

    def get_nested_child(
        self, path: str, separator: str = DEFAULT_SEPARATOR
    ) -> Optional["Component"]:
        """
        Resolve a nested child by path.

        Params:
            path: Separator-joined child names, relative to this component
            separator: Separator between component names

        Returns:
            The resolved component, or None as soon as any segment is missing

        Raises:
            PathValidationError: If separator is empty
        """
        component: Component | None = self
        for name in split_component_path(path, separator):
            component = component.get_child(name)
            if component is None:
                return None
        return component

    def has_nested_child(self, path: str, separator: str = DEFAULT_SEPARATOR) -> bool:
        return self.get_nested_child(path, separator) is not None

    def remove_nested_child(self, path: str, separator: str = DEFAULT_SEPARATOR) -> None:
        """
        Detach the component at `path` from its direct parent.

        Params:
            path: Separator-joined child names, relative to this component
            separator: Separator between component names

        Raises:
            PathNotFoundError: If the path does not resolve
        """
        component = self.get_nested_child(path, separator)
        if component is None:
            raise PathNotFoundError(path, self._name)
        component.remove()

    def move_nested_child(
        self,
        source_path: str,
        destination_path: str,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        """
        Move the component at `source_path` under the one at `destination_path`.

        Both paths are relative to this component. The moved component keeps
        its name and whole subtree and becomes the last child of the
        destination. Every precondition is checked before the source is
        detached, so a failed move leaves the tree untouched.

        Params:
            source_path: Path of the component to move
            destination_path: Path of the new parent
            separator: Separator between component names

        Raises:
            PathNotFoundError: If either path does not resolve
            DuplicateChildError: If the destination already has a child with the source's name
            CyclicMoveError: If the destination lies inside the moved subtree
        """
        source = self.get_nested_child(source_path, separator)
        if source is None:
            raise PathNotFoundError(source_path, self._name, "source")
        destination = self.get_nested_child(destination_path, separator)
        if destination is None:
            raise PathNotFoundError(destination_path, self._name, "destination")

        # add_child validates before detaching from the old parent
        destination.add_child(source)
        logger.debug(
            "Moved component '%s' from '%s' to '%s'",
            source.name,
            source_path,
            destination_path,
        )

    # Generic attribute access

    def get_data(self, key: str, default: LayoutValue = None) -> LayoutValue:
        return self._data.get(key, default)

    def has_data(self, key: str) -> bool:
        return key in self._data

    def set_data(self, key: str, value: LayoutValue) -> "Component":
        """
        Set an attribute value, including keys without a typed accessor.

        Raises:
            ReservedAttributeError: If key is `children`
        """
        if key == CHILDREN_KEY:
            raise ReservedAttributeError(key)
        self._data[key] = value
        return self

    def unset_data(self, key: str) -> "Component":
        """Remove an attribute so it is omitted from serialization."""
        if key == CHILDREN_KEY:
            raise ReservedAttributeError(key)
        self._data.pop(key, None)
        return self

    # Typed attribute accessors

    def get_component(self) -> str | None:
        return self.get_data("component")

    def set_component(self, component: str) -> "Component":
        return self.set_data("component", component)

    def get_config(self) -> dict[str, Any]:
        return dict(self.get_data("config") or {})

    def set_config(self, config: Mapping[str, Any], replace: bool = False) -> "Component":
        """
        Update the `config` attribute.

        Params:
            config: Configuration values to store
            replace: Discard the existing config instead of merging into it.
                Merging is shallow: keys in `config` overwrite existing ones,
                other existing keys are preserved.
        """
        if replace:
            return self.set_data("config", dict(config))
        return self.set_data("config", {**self.get_config(), **config})

    def get_data_scope(self) -> str | None:
        return self.get_data("dataScope")

    def set_data_scope(self, data_scope: str) -> "Component":
        return self.set_data("dataScope", data_scope)

    def get_display_area(self) -> str | None:
        return self.get_data("displayArea")

    def set_display_area(self, display_area: str) -> "Component":
        return self.set_data("displayArea", display_area)

    def get_label(self) -> LayoutValue:
        return self.get_data("label")

    def set_label(self, label: LayoutValue) -> "Component":
        return self.set_data("label", label)

    def get_provider(self) -> str | None:
        return self.get_data("provider")

    def set_provider(self, provider: str) -> "Component":
        return self.set_data("provider", provider)

    def get_sort_order(self) -> str | None:
        return self.get_data("sortOrder")

    def set_sort_order(self, sort_order: str) -> "Component":
        return self.set_data("sortOrder", sort_order)

    def get_validation(self) -> dict[str, Any] | None:
        return self.get_data("validation")

    def set_validation(self, validation: dict[str, Any] | None) -> "Component":
        """Set validation rules; None is stored and serialized as an explicit null."""
        return self.set_data("validation", validation)

    def get_filter_by(self) -> dict[str, Any] | None:
        return self.get_data("filterBy")

    def set_filter_by(self, filter_by: dict[str, Any] | None = None) -> "Component":
        """Set the filter rule; None is stored and serialized as an explicit null."""
        return self.set_data("filterBy", filter_by)

    def is_visible(self) -> bool:
        return bool(self.get_data("visible", False))

    def set_visible(self, visible: bool) -> "Component":
        return self.set_data("visible", visible)

    def is_required(self) -> bool:
        return bool(self.get_data("required", False))

    def set_required(self, required: bool) -> "Component":
        return self.set_data("required", required)

    # Serialization

    def as_dict(self) -> LayoutDict:
        """
        Recursively convert the component and its subtree into a plain mapping.

        The result has the same shape the component was built from: every
        attribute as-is, plus a `children` mapping in child order when the
        component has children. A childless component keeps the empty
        `children` container it was built from, and has no `children` key
        otherwise.
        The result shares no mutable state with the tree.

        Returns:
            Nested mapping suitable for re-embedding into a layout document
        """
        result = copy.deepcopy(self._data)
        if self._children:
            result[CHILDREN_KEY] = {
                name: child.as_dict() for name, child in self._children.items()
            }
        elif self._empty_children is not None:
            result[CHILDREN_KEY] = type(self._empty_children)()
        return result

    to_dict = as_dict
