"""CLI command: cssbuilder build -- build one compound selector."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder import SelectorBuilder
from cssbuilder.errors import SelectorError
from cssbuilder.model import PartKind


@click.command()
@click.option("-e", "--element", "elements", multiple=True, help="Element (tag) name.")
@click.option("-i", "--id", "ids", multiple=True, help="Id, without '#'.")
@click.option("-c", "--class", "classes", multiple=True, help="Class name, without '.'.")
@click.option("-a", "--attr", "attrs", multiple=True, help="Attribute expression, without brackets.")
@click.option("-p", "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, without ':'.")
@click.option("-P", "--pseudo-element", "pseudo_elements", multiple=True, help="Pseudo-element, without '::'.")
def build(
    elements: tuple[str, ...],
    ids: tuple[str, ...],
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_elements: tuple[str, ...],
) -> None:
    """Build a compound selector and print it.

    Parts are applied in canonical order (element, id, class, attribute,
    pseudo-class, pseudo-element) whatever order the options are given in.
    Exits with code 1 if the parts do not form a valid selector.
    """
    groups = [
        (PartKind.ELEMENT, elements),
        (PartKind.ID, ids),
        (PartKind.CLASS, classes),
        (PartKind.ATTRIBUTE, attrs),
        (PartKind.PSEUDO_CLASS, pseudo_classes),
        (PartKind.PSEUDO_ELEMENT, pseudo_elements),
    ]
    if not any(values for _, values in groups):
        raise click.UsageError("Give at least one selector part.")

    chain = SelectorBuilder().start()
    try:
        for kind, values in groups:
            for value in values:
                chain.add(kind, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(chain.stringify())
