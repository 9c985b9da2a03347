"""Selector builder facade: entry points that start a new Selector."""

from __future__ import annotations

import logging

from objtasks.config import BuilderConfig
from objtasks.selector.errors import CombinatorError
from objtasks.selector.model import Selector

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Facade for building CSS selectors.

    Each fragment method starts a fresh :class:`Selector`; further fragments
    are chained on the returned value::

        css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")

    ``combine`` joins two finished selectors with a combinator.  The combined
    selector starts over with no order or uniqueness state of its own.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def element(self, name: str) -> Selector:
        return Selector().element(name)

    def id(self, name: str) -> Selector:
        return Selector().id(name)

    def class_(self, name: str) -> Selector:
        return Selector().class_(name)

    def attr(self, spec: str) -> Selector:
        return Selector().attr(spec)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().pseudo_element(name)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Return ``"<left> <combinator> <right>"`` as a new Selector.

        Raises:
            CombinatorError: validation is enabled and *combinator* is not one
                of the configured combinators.
        """
        if self.config.validate_combinators and combinator not in self.config.combinators:
            raise CombinatorError(combinator, self.config.combinators)
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector: %r", text)
        return Selector(text=text)


css_selector_builder = SelectorBuilder()
