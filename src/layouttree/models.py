from attrs import field, frozen

from layouttree.core.path_utils import validate_separator
from layouttree.core.types import DEFAULT_SEPARATOR


def _check_separator(instance, attribute, value):
    validate_separator(value)


@frozen
class LayoutSettings:
    """Immutable settings shared by layout document adapters.

    Attributes:
      - components_key: top-level document key holding the root components.
      - path_separator: separator used by `JsLayoutParser.get_component`.
    """

    components_key: str = "components"
    path_separator: str = field(default=DEFAULT_SEPARATOR, validator=_check_separator)


DEFAULT_SETTINGS = LayoutSettings()
