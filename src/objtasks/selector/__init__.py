from objtasks.selector.builder import SelectorBuilder, css_selector_builder
from objtasks.selector.errors import (
    CombinatorError,
    DuplicateViolation,
    OrderViolation,
    SelectorError,
    SelectorParseError,
)
from objtasks.selector.model import Fragment, FragmentKind, Selector
from objtasks.selector.parser import parse_selector

__all__ = [
    # builder
    "SelectorBuilder",
    "css_selector_builder",
    "parse_selector",
    # model
    "Selector",
    "Fragment",
    "FragmentKind",
    # errors
    "SelectorError",
    "OrderViolation",
    "DuplicateViolation",
    "CombinatorError",
    "SelectorParseError",
]
