"""objtasks -- CSS selector builder and small object/JSON utilities."""

from objtasks.model import Circle, Rectangle
from objtasks.selector import (
    CombinatorError,
    DuplicateViolation,
    OrderViolation,
    Selector,
    SelectorBuilder,
    SelectorError,
    SelectorParseError,
    css_selector_builder,
    parse_selector,
)
from objtasks.serialization import from_json, get_json

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # selector
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    "parse_selector",
    "SelectorError",
    "OrderViolation",
    "DuplicateViolation",
    "CombinatorError",
    "SelectorParseError",
    # model
    "Rectangle",
    "Circle",
    # serialization
    "get_json",
    "from_json",
]
