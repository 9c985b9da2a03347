"""CLI command: objtasks build -- assemble a compound selector from fragments."""

from __future__ import annotations

import sys

import click

from objtasks.selector import Selector, SelectorError
from objtasks.selector.model import FragmentKind

# Argument prefixes accepted on the command line.
_KINDS: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}


def _split_fragment(raw: str) -> tuple[FragmentKind, str]:
    name, sep, value = raw.partition("=")
    kind = _KINDS.get(name.strip().lower())
    if not sep or kind is None:
        choices = ", ".join(_KINDS)
        raise click.BadParameter(
            f"{raw!r} is not KIND=VALUE with KIND one of: {choices}",
            param_hint="FRAGMENTS",
        )
    return kind, value


@click.command()
@click.argument("fragments", nargs=-1, required=True)
def build(fragments: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE fragments, in the order given.

    Example: objtasks build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    parsed = [_split_fragment(raw) for raw in fragments]

    selector = Selector()
    try:
        for kind, value in parsed:
            selector = selector.append(kind, value)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
