"""CLI command: objtasks validate -- parse and check a selector string."""

from __future__ import annotations

import sys

import click

from objtasks.config import BuilderConfig
from objtasks.selector import SelectorBuilder, SelectorError, SelectorParseError, parse_selector


@click.command()
@click.argument("selector")
@click.pass_obj
def validate(config: BuilderConfig | None, selector: str) -> None:
    """Parse SELECTOR and check fragment order and uniqueness.

    Prints the selector as the builder renders it and exits with code 0, or
    prints the error and exits with code 1.
    """
    builder = SelectorBuilder(config)
    try:
        result = parse_selector(selector, builder=builder)
    except SelectorParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Invalid selector: {exc}", err=True)
        sys.exit(1)

    click.echo(result.stringify())
