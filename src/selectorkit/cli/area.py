"""CLI command: selectorkit area -- decode a rectangle and print its area."""

from __future__ import annotations

import json
import sys

import click

from selectorkit.codec import decode
from selectorkit.errors import BindingError
from selectorkit.shapes import Rectangle


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@click.command()
@click.argument("source")
def area(source: str) -> None:
    """Decode SOURCE, a JSON object with width and height, and print its area."""
    try:
        rect = decode(Rectangle, source)
    except (json.JSONDecodeError, BindingError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    missing = [name for name in ("width", "height") if not hasattr(rect, name)]
    if missing:
        click.echo(f"Error: missing rectangle field ({', '.join(missing)})", err=True)
        sys.exit(1)
    if not (_is_number(rect.width) and _is_number(rect.height)):
        click.echo("Error: width and height must be numbers", err=True)
        sys.exit(1)

    click.echo(rect.area)
