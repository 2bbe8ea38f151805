"""CLI commands: cssbuilder rectangle / decode-rectangle."""

from __future__ import annotations

import sys

import click

from cssbuilder.errors import ParseError
from cssbuilder.objects import Rectangle, decode, encode, make_rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--indent", default=None, type=int, help="Pretty-print JSON with this indent")
def rectangle(width: float, height: float, indent: int | None) -> None:
    """Print a rectangle as JSON followed by its area."""
    rect = make_rectangle(width, height)
    click.echo(encode(rect, indent=indent))
    click.echo(f"area: {rect.area():g}")


@click.command("decode-rectangle")
@click.argument("json_text")
def decode_rectangle(json_text: str) -> None:
    """Decode a rectangle from JSON and print its area.

    Values are taken in document order: the first is the width, the second
    the height.
    """
    try:
        rect = decode(Rectangle, json_text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except TypeError as exc:
        click.echo(f"Cannot build rectangle: {exc}", err=True)
        sys.exit(1)
    click.echo(f"{rect.width:g} x {rect.height:g}, area: {rect.area():g}")
