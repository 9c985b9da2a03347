"""Lark-based parser that rebuilds selector strings through the builder.

Syntax example:
    div#main.container + table#data ~ tr:nth-of-type(even)   td
    a[href$=".png"]:focus
    p::first-line
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from objtasks.selector.builder import SelectorBuilder, css_selector_builder
from objtasks.selector.errors import SelectorError, SelectorParseError
from objtasks.selector.model import Fragment, FragmentKind, Selector

__all__ = ["parse_selector"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a Selector.

    Each compound selector is replayed fragment by fragment, so the usual
    order and uniqueness checks apply to parsed input as well.
    """

    def __init__(self, builder: SelectorBuilder) -> None:
        super().__init__()
        self.builder = builder

    # ---- fragments ----

    def type_sel(self, items: list[Token]) -> Fragment:
        return Fragment(FragmentKind.ELEMENT, str(items[0]))

    def id_sel(self, items: list[Token]) -> Fragment:
        return Fragment(FragmentKind.ID, str(items[0])[1:])

    def class_sel(self, items: list[Token]) -> Fragment:
        return Fragment(FragmentKind.CLASS, str(items[0])[1:])

    def attr_sel(self, items: list[Token]) -> Fragment:
        return Fragment(FragmentKind.ATTRIBUTE, str(items[0])[1:-1])

    def pseudo_class_sel(self, items: list[Token]) -> Fragment:
        return Fragment(FragmentKind.PSEUDO_CLASS, str(items[0])[1:])

    def pseudo_element_sel(self, items: list[Token]) -> Fragment:
        return Fragment(FragmentKind.PSEUDO_ELEMENT, str(items[0])[2:])

    # ---- structural ----

    def compound(self, items: list[Fragment]) -> Selector:
        selector = Selector()
        for fragment in items:
            selector = selector.append(fragment.kind, fragment.value)
        return selector

    def start(self, items: list[object]) -> Selector:
        result: Selector = items[0]  # type: ignore[assignment]
        for i in range(1, len(items), 2):
            # A whitespace-only combinator is the descendant combinator.
            combinator = str(items[i]).strip() or " "
            result = self.builder.combine(result, combinator, items[i + 1])  # type: ignore[arg-type]
        return result


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_selector(source: str, builder: SelectorBuilder | None = None) -> Selector:
    """Parse a CSS selector string into a Selector.

    Raises:
        SelectorParseError: *source* is empty or not valid selector syntax.
        OrderViolation: a compound selector lists fragments out of order.
        DuplicateViolation: a compound selector repeats an element, id or
            pseudo-element.
    """
    text = source.strip()
    if not text:
        raise SelectorParseError("Empty selector")
    try:
        tree = _parser().parse(text)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SelectorParseError(str(e), line=line, column=column) from e

    transformer = SelectorTransformer(builder or css_selector_builder)
    try:
        return transformer.transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, SelectorError):
            raise e.orig_exc from None
        raise
