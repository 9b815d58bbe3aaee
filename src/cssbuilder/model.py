"""Selector model: parts, simple selectors and combinator trees.

A simple selector is a rank-ordered run of parts::

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              may repeat

Composite selectors join two selectors with a combinator and nest freely.
All model values are immutable; building happens in
:class:`cssbuilder.builder.SelectorChain`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator

from cssbuilder.errors import (
    DuplicateUniquePartError,
    EmptyPartValueError,
    InvalidCombinatorError,
    OutOfOrderPartError,
)

__all__ = [
    "PartKind",
    "Combinator",
    "SelectorPart",
    "SimpleSelector",
    "CompositeSelector",
    "Selector",
]


class PartKind(StrEnum):
    """Kind of a selector part, declared in rank order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True for kinds that may occur at most once per simple selector."""
        return self in (PartKind.ELEMENT, PartKind.PSEUDO_ELEMENT)

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[PartKind, int] = {kind: rank for rank, kind in enumerate(PartKind)}

_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(StrEnum):
    """The closed set of combinators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def parse(cls, symbol: object) -> Combinator:
        """Coerce a symbol to a Combinator, rejecting anything unknown."""
        if isinstance(symbol, Combinator):
            return symbol
        if isinstance(symbol, str):
            try:
                return cls(symbol)
            except ValueError:
                pass
        raise InvalidCombinatorError(symbol)


@dataclass(frozen=True)
class SelectorPart:
    """One atomic token of a simple selector."""

    kind: PartKind
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"Selector part value must be str, not {type(self.value).__name__}"
            )
        if not self.value:
            raise EmptyPartValueError(self.kind)

    @property
    def rank(self) -> int:
        return self.kind.rank

    def __str__(self) -> str:
        return self.kind.render(self.value)


def _check_next(parts: tuple[SelectorPart, ...], part: SelectorPart) -> None:
    if part.kind.unique and any(p.kind is part.kind for p in parts):
        raise DuplicateUniquePartError(part.kind)
    if parts and part.rank < parts[-1].rank:
        raise OutOfOrderPartError(part.kind, parts[-1].kind)


@dataclass(frozen=True)
class SimpleSelector:
    """A compound selector: parts in non-decreasing rank order.

    At most one ``element`` and one ``pseudoElement`` part may appear; every
    other kind may repeat.

    Raises:
        DuplicateUniquePartError: an element or pseudo-element repeats.
        OutOfOrderPartError: a part ranks below the part before it.
    """

    parts: tuple[SelectorPart, ...] = ()

    def __post_init__(self) -> None:
        parts = tuple(self.parts)
        for i, part in enumerate(parts):
            if not isinstance(part, SelectorPart):
                raise TypeError(
                    f"Selector parts must be SelectorPart, not {type(part).__name__}"
                )
            _check_next(parts[:i], part)
        object.__setattr__(self, "parts", parts)

    def append(self, part: SelectorPart) -> SimpleSelector:
        """Return a new selector with ``part`` appended."""
        return SimpleSelector(parts=self.parts + (part,))

    def stringify(self) -> str:
        return "".join(str(part) for part in self.parts)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CompositeSelector:
    """Two selectors joined by a combinator.

    ``combinator`` may be given as a symbol string; it is stored as a
    :class:`Combinator`.
    """

    left: Selector
    combinator: Combinator
    right: Selector

    def __post_init__(self) -> None:
        object.__setattr__(self, "combinator", Combinator.parse(self.combinator))
        for side in (self.left, self.right):
            if not isinstance(side, (SimpleSelector, CompositeSelector)):
                raise TypeError(f"Cannot combine {type(side).__name__}")

    def walk(self) -> Iterator[SimpleSelector | Combinator]:
        """Yield simple selectors and combinators left to right.

        Uses an explicit stack, so nesting depth is not bounded by the
        recursion limit.
        """
        stack: list[Selector | Combinator] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, CompositeSelector):
                stack.extend((item.right, item.combinator, item.left))
            else:
                yield item

    def stringify(self) -> str:
        return "".join(
            f" {item.value} " if isinstance(item, Combinator) else item.stringify()
            for item in self.walk()
        )

    def __str__(self) -> str:
        return self.stringify()


Selector = SimpleSelector | CompositeSelector
