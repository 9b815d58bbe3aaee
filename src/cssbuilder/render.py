"""Serialization of selector values to CSS text."""

from __future__ import annotations

from dataclasses import dataclass

from cssbuilder.model import Combinator, CompositeSelector, Selector, SimpleSelector

__all__ = ["RenderOptions", "stringify"]


@dataclass(frozen=True)
class RenderOptions:
    """Output options for :func:`stringify`.

    Attributes:
        collapse_descendant: Render the descendant combinator as a single
            space (``"tr td"``) instead of the space-padded ``"tr   td"``.
    """

    collapse_descendant: bool = False

    def combinator_text(self, combinator: Combinator) -> str:
        if combinator is Combinator.DESCENDANT and self.collapse_descendant:
            return " "
        return f" {combinator.value} "


DEFAULT_OPTIONS = RenderOptions()


def stringify(selector: Selector, options: RenderOptions | None = None) -> str:
    """Render a selector value to its canonical CSS text.

    Composite trees are rendered left to right, depth first (see
    :meth:`CompositeSelector.walk`). Builder chains are accepted by
    :func:`cssbuilder.builder.stringify`, which finalizes them first.
    """
    opts = options or DEFAULT_OPTIONS
    if isinstance(selector, SimpleSelector):
        return selector.stringify()
    if not isinstance(selector, CompositeSelector):
        raise TypeError(f"Cannot stringify {type(selector).__name__}")

    out: list[str] = []
    for item in selector.walk():
        if isinstance(item, Combinator):
            out.append(opts.combinator_text(item))
        else:
            out.append(item.stringify())
    return "".join(out)
