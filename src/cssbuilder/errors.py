"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import Any

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
PART_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""


class DuplicateUniquePartError(SelectorError):
    """An element or pseudo-element was added twice to one selector."""

    def __init__(self, kind: Any) -> None:
        super().__init__(f"{DUPLICATE_PART_MESSAGE} (duplicate {kind})")
        self.kind = kind


class OutOfOrderPartError(SelectorError):
    """A part was added after a part of a higher rank."""

    def __init__(self, kind: Any, previous: Any) -> None:
        super().__init__(f"{PART_ORDER_MESSAGE} ({kind} after {previous})")
        self.kind = kind
        self.previous = previous


class InvalidCombinatorError(SelectorError, ValueError):
    """combine() received a symbol outside the four known combinators."""

    def __init__(self, combinator: object) -> None:
        super().__init__(
            f"Invalid combinator {combinator!r}: expected one of ' ', '>', '+', '~'"
        )
        self.combinator = combinator


class EmptyPartValueError(SelectorError, ValueError):
    """A selector part was given an empty value."""

    def __init__(self, kind: Any) -> None:
        super().__init__(f"Selector part {kind} requires a non-empty value")
        self.kind = kind


class ChainClosedError(SelectorError):
    """A selector chain was used after it was discarded or finalized."""

    def __init__(self, state: str) -> None:
        super().__init__(
            f"Selector chain is {state}; start a new chain from the builder"
        )
        self.state = state
