"""CLI command: selectorkit build -- render a compound selector."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import SelectorError
from selectorkit.selector import Category, SelectorBuilder

_KINDS: dict[str, Category] = {
    "element": Category.TYPE,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}


def _parse_part(part: str) -> tuple[Category, str]:
    kind, sep, value = part.partition("=")
    if not sep or kind not in _KINDS:
        raise click.BadParameter(
            f"{part!r} is not KIND=VALUE with KIND one of {', '.join(_KINDS)}",
            param_hint="PART",
        )
    return _KINDS[kind], value


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE parts applied in order.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    """
    builder = SelectorBuilder()
    for part in parts:
        category, value = _parse_part(part)
        try:
            builder = builder.append(category, value)
        except SelectorError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)

    click.echo(builder.render())
