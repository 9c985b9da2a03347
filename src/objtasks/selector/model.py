"""Selector model: FragmentKind, Fragment, and the immutable Selector value."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import IntEnum

from objtasks.selector.errors import DuplicateViolation, OrderViolation

logger = logging.getLogger(__name__)


class FragmentKind(IntEnum):
    """Fragment kinds in the order they must appear inside a compound selector.

    The integer value is the kind's rank.  ``INITIAL`` marks a selector that
    has no fragments yet.
    """

    INITIAL = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def unique(self) -> bool:
        """True for kinds that may occur at most once per selector."""
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        """Return the selector text for *value* as a fragment of this kind."""
        return _TEMPLATES[self].format(value)


_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_TEMPLATES: dict[FragmentKind, str] = {
    FragmentKind.INITIAL: "",
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}


@dataclass(frozen=True)
class Fragment:
    """One piece of a compound selector."""

    kind: FragmentKind
    value: str

    def render(self) -> str:
        return self.kind.render(self.value)


@dataclass(frozen=True)
class Selector:
    """A CSS selector under construction.

    Every fragment method returns a new Selector; the receiver is never
    modified, so partially built selectors can be reused as prefixes.

    Attributes:
        text: The rendered selector so far.
        rank: The kind of the last appended fragment.
        used: Kinds appended so far.
        fragments: Fragments of the current compound selector, in order.
    """

    text: str = ""
    rank: FragmentKind = FragmentKind.INITIAL
    used: frozenset[FragmentKind] = frozenset()
    fragments: tuple[Fragment, ...] = field(default_factory=tuple)

    # --- fragments ------------------------------------------------------------

    def element(self, name: str) -> Selector:
        return self.append(FragmentKind.ELEMENT, name)

    def id(self, name: str) -> Selector:
        return self.append(FragmentKind.ID, name)

    def class_(self, name: str) -> Selector:
        return self.append(FragmentKind.CLASS, name)

    def attr(self, spec: str) -> Selector:
        """Append an attribute fragment; *spec* is the raw expression, e.g. ``href$=".png"``."""
        return self.append(FragmentKind.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> Selector:
        return self.append(FragmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> Selector:
        return self.append(FragmentKind.PSEUDO_ELEMENT, name)

    def append(self, kind: FragmentKind, value: str) -> Selector:
        """Return a new Selector with a *kind* fragment appended.

        Raises:
            OrderViolation: *kind* ranks below the last appended fragment.
            DuplicateViolation: *kind* is unique and was already appended.
        """
        if kind is FragmentKind.INITIAL:
            raise ValueError("INITIAL is not an appendable fragment kind")
        if kind < self.rank:
            logger.debug("Rejected %s after %s in %r", kind.name, self.rank.name, self.text)
            raise OrderViolation(kind)
        if kind.unique and kind in self.used:
            logger.debug("Rejected second %s in %r", kind.name, self.text)
            raise DuplicateViolation(kind)

        fragment = Fragment(kind, value)
        text = self.text + fragment.render()
        logger.debug("Appended %s fragment: %r", kind.name, text)
        return replace(
            self,
            text=text,
            rank=kind,
            used=self.used | {kind},
            fragments=self.fragments + (fragment,),
        )

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Return the rendered selector string."""
        return self.text

    def __str__(self) -> str:
        return self.text
