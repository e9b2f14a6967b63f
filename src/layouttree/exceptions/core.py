"""
Exception classes for layout component trees.

This module defines specific exception types for the error conditions that
can occur while parsing a layout document and editing its component tree.
"""


class LayoutTreeError(Exception):
    """Base exception for all layout tree errors."""

    pass


class DuplicateChildError(LayoutTreeError):
    """Raised when attempting to add a child whose name is already taken."""

    def __init__(self, child_name: str, parent_name: str):
        """
        Initialize the exception.

        Params:
            child_name: Name of the child that could not be added
            parent_name: Name of the component that already has such a child
        """
        self.child_name = child_name
        self.parent_name = parent_name
        super().__init__(
            f"Component '{parent_name}' already has '{child_name}' as a child"
        )


class MissingChildError(LayoutTreeError):
    """Raised when removing a child that does not exist."""

    def __init__(self, child_name: str, parent_name: str):
        """
        Initialize the exception.

        Params:
            child_name: Name of the child that was not found
            parent_name: Name of the component that was searched
        """
        self.child_name = child_name
        self.parent_name = parent_name
        super().__init__(
            f"Component '{child_name}' does not exist in '{parent_name}'"
        )


class PathNotFoundError(LayoutTreeError):
    """Raised when a nested path required by an operation does not resolve."""

    def __init__(self, path: str, component_name: str, role: str = "target"):
        """
        Initialize the exception.

        Params:
            path: The nested path that did not resolve
            component_name: Name of the component the path is relative to
            role: What the path was used as ("source", "destination" or "target")
        """
        self.path = path
        self.component_name = component_name
        self.role = role
        super().__init__(
            f"{role.capitalize()} path '{path}' does not exist in '{component_name}'"
        )


class RootNotFoundError(LayoutTreeError):
    """Raised when the requested root component is absent from a document."""

    def __init__(self, root_name: str, available: list[str] | None = None):
        """
        Initialize the exception.

        Params:
            root_name: The root component that was requested
            available: Root component names present in the document
        """
        self.root_name = root_name
        self.available = available or []
        message = f"Root component '{root_name}' not found in layout"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class CyclicMoveError(LayoutTreeError):
    """Raised when a component would become its own descendant."""

    def __init__(self, child_name: str, parent_name: str):
        """
        Initialize the exception.

        Params:
            child_name: Name of the component being attached
            parent_name: Name of the component inside the attached subtree
        """
        self.child_name = child_name
        self.parent_name = parent_name
        super().__init__(
            f"Cannot attach '{child_name}' to '{parent_name}': "
            f"'{parent_name}' is '{child_name}' or one of its descendants"
        )


class ReservedAttributeError(LayoutTreeError, KeyError):
    """Raised when generic attribute access targets a structural key."""

    def __init__(self, key: str):
        """
        Initialize the exception.

        Params:
            key: The reserved attribute key
        """
        self.key = key
        super().__init__(
            f"Attribute '{key}' is structural and is managed through child operations"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class PathValidationError(LayoutTreeError, ValueError):
    """Raised when a path or path separator is malformed."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The invalid path
            reason: Why the path is invalid
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path '{path}': {reason}")


class LayoutDocumentError(LayoutTreeError, ValueError):
    """Raised when a layout document does not have the expected shape."""

    def __init__(self, reason: str):
        """
        Initialize the exception.

        Params:
            reason: Description of the structural problem
        """
        self.reason = reason
        super().__init__(f"Malformed layout document: {reason}")
