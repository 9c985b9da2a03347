"""Selector error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selector.model import FragmentKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
UNIQUENESS_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for everything the selector builder rejects."""

    def __init__(self, message: str, kind: FragmentKind | None = None):
        self.kind = kind
        super().__init__(message)


class OrderViolation(SelectorError):
    """Raised when a fragment ranks below one already appended."""

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(ORDER_MESSAGE, kind=kind)


class DuplicateViolation(SelectorError):
    """Raised when an element, id or pseudo-element is appended twice."""

    def __init__(self, kind: FragmentKind | None = None):
        super().__init__(UNIQUENESS_MESSAGE, kind=kind)


class CombinatorError(SelectorError):
    """Raised when combine() receives an unknown combinator token."""

    def __init__(self, combinator: str, allowed: tuple[str, ...]):
        self.combinator = combinator
        choices = ", ".join(repr(c) for c in allowed)
        super().__init__(f"Unknown combinator {combinator!r}; expected one of {choices}")


class SelectorParseError(SelectorError):
    """Raised when selector source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
