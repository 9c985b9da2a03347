"""CLI commands: objtasks json / objtasks area -- shapes through JSON."""

from __future__ import annotations

import json
import sys

import click

from objtasks.model import Circle, Rectangle
from objtasks.serialization import from_json, get_json

_SHAPES: dict[str, type[Rectangle] | type[Circle]] = {
    "rectangle": Rectangle,
    "circle": Circle,
}


@click.command("json")
@click.argument("shape", type=click.Choice(sorted(_SHAPES)))
@click.option("--width", type=float, help="Rectangle width")
@click.option("--height", type=float, help="Rectangle height")
@click.option("--radius", type=float, help="Circle radius")
def json_cmd(
    shape: str, width: float | None, height: float | None, radius: float | None
) -> None:
    """Print SHAPE as compact JSON."""
    if shape == "rectangle":
        if width is None or height is None:
            raise click.UsageError("rectangle needs --width and --height")
        obj: Rectangle | Circle = Rectangle(width=width, height=height)
    else:
        if radius is None:
            raise click.UsageError("circle needs --radius")
        obj = Circle(radius=radius)
    click.echo(get_json(obj))


@click.command()
@click.argument("source")
@click.option(
    "--shape",
    type=click.Choice(sorted(_SHAPES)),
    default="rectangle",
    show_default=True,
    help="Type to build from the JSON object",
)
def area(source: str, shape: str) -> None:
    """Rebuild a shape from the JSON object SOURCE and print its area."""
    try:
        obj = from_json(_SHAPES[shape], source)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
        click.echo(f"Cannot build {shape}: {exc}", err=True)
        sys.exit(1)
    click.echo(f"{obj.area():g}")
