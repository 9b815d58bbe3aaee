"""CLI command: cssbuilder combine -- join selectors with combinators."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder import SelectorBuilder, SelectorChain
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.model import PartKind, Selector


def _build_operand(builder: SelectorBuilder, text: str) -> SelectorChain:
    """Build a chain from a part list such as ``element=div;id=main``."""
    chain = builder.start()
    for item in text.split(";"):
        kind, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(
                f"expected kind=value, got {item!r}", param_hint="OPERANDS"
            )
        try:
            part_kind = PartKind(kind.strip())
        except ValueError:
            names = ", ".join(k.value for k in PartKind)
            raise click.BadParameter(
                f"unknown part kind {kind!r} (expected one of {names})",
                param_hint="OPERANDS",
            ) from None
        chain.add(part_kind, value)
    return chain


@click.command()
@click.argument("operands", nargs=-1, required=True)
@click.option(
    "--collapse-descendant",
    is_flag=True,
    help="Render the descendant combinator as a single space.",
)
def combine(operands: tuple[str, ...], collapse_descendant: bool) -> None:
    """Join selectors: OPERAND [COMBINATOR OPERAND ...].

    Each OPERAND is a part list like "element=div;id=main;class=wide".
    Operands are joined right to left, so "a + b ~ c" nests as
    a + (b ~ c). Exits with code 1 on an invalid selector or combinator.
    """
    if len(operands) % 2 == 0:
        raise click.UsageError(
            "Expected OPERAND [COMBINATOR OPERAND ...] (an odd number of arguments)."
        )

    builder = SelectorBuilder(BuilderConfig(collapse_descendant=collapse_descendant))
    try:
        chains = [_build_operand(builder, text) for text in operands[::2]]
        result: Selector | SelectorChain = chains[-1]
        for left, symbol in zip(reversed(chains[:-1]), reversed(operands[1::2])):
            result = builder.combine(left, symbol, result)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.stringify(result))
