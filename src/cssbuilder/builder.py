"""Selector builder: fresh entry points, chain handles and combine.

Every call on a :class:`SelectorBuilder` starts a new, independent
:class:`SelectorChain`; calls on the returned chain continue it::

    builder = SelectorBuilder()
    link = builder.element("a").attr('href$=".png"').pseudo_class("focus")
    str(link)  # 'a[href$=".png"]:focus'

Chains own their selector exclusively, so builders can be shared freely.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import ChainClosedError, SelectorError
from cssbuilder.model import (
    Combinator,
    CompositeSelector,
    PartKind,
    Selector,
    SelectorPart,
    SimpleSelector,
)
from cssbuilder.render import RenderOptions
from cssbuilder.render import stringify as _render

__all__ = ["ChainState", "SelectorChain", "SelectorBuilder", "combine", "stringify"]

_log = logging.getLogger("cssbuilder")


class ChainState(StrEnum):
    OPEN = "open"
    FINALIZED = "finalized"
    DISCARDED = "discarded"


class SelectorChain:
    """Handle over one in-progress simple selector.

    Part methods append to this chain's selector and return the chain. A
    failed append discards the chain; a chain passed to :func:`combine` or
    :func:`stringify` is finalized and accepts no more
    parts.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._selector: SimpleSelector | None = SimpleSelector()
        self._state = ChainState.OPEN
        self._log = logger or _log

    @property
    def state(self) -> ChainState:
        return self._state

    @property
    def selector(self) -> SimpleSelector:
        """The selector built so far."""
        if self._selector is None:
            raise ChainClosedError(self._state.value)
        return self._selector

    # --- parts -------------------------------------------------------------

    def element(self, value: str) -> SelectorChain:
        return self._add(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorChain:
        return self._add(PartKind.ID, value)

    def class_(self, value: str) -> SelectorChain:
        return self._add(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorChain:
        return self._add(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorChain:
        return self._add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorChain:
        return self._add(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: PartKind | str, value: str) -> SelectorChain:
        """Append a part by kind name, e.g. ``add("pseudoClass", "hover")``."""
        self._check_open()
        return self._add(PartKind(kind), value)

    def _check_open(self) -> None:
        if self._state is not ChainState.OPEN or self._selector is None:
            raise ChainClosedError(self._state.value)

    def _add(self, kind: PartKind, value: str) -> SelectorChain:
        self._check_open()
        try:
            self._selector = self._selector.append(SelectorPart(kind, value))
        except (SelectorError, TypeError) as exc:
            self._discard(exc)
            raise
        return self

    def _discard(self, exc: Exception) -> None:
        self._selector = None
        self._state = ChainState.DISCARDED
        self._log.debug("Discarded selector chain %#x: %s", id(self), exc)

    # --- finalization ------------------------------------------------------

    def finalize(self) -> SimpleSelector:
        """Freeze the chain and return its selector."""
        selector = self.selector
        self._state = ChainState.FINALIZED
        return selector

    def stringify(self, options: RenderOptions | None = None) -> str:
        return _render(self.finalize(), options)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        parts = "" if self._selector is None else self._selector.stringify()
        return f"SelectorChain({self._state.value}, {parts!r})"


def _check_operand(operand: object) -> None:
    if isinstance(operand, SelectorChain):
        if operand.state is ChainState.DISCARDED:
            raise ChainClosedError(operand.state.value)
    elif not isinstance(operand, (SimpleSelector, CompositeSelector)):
        raise TypeError(f"Cannot combine {type(operand).__name__}")


def _as_selector(operand: Selector | SelectorChain) -> Selector:
    if isinstance(operand, SelectorChain):
        return operand.finalize()
    return operand


def combine(
    left: Selector | SelectorChain,
    combinator: Combinator | str,
    right: Selector | SelectorChain,
) -> CompositeSelector:
    """Join two selectors with a combinator into a new composite selector.

    Both operands are checked before either chain is finalized, so a
    rejected call leaves its operands untouched.

    Raises:
        InvalidCombinatorError: ``combinator`` is not one of ``' '``,
            ``'>'``, ``'+'`` or ``'~'``.
        ChainClosedError: an operand is a discarded chain.
        TypeError: an operand is not a selector.
    """
    symbol = Combinator.parse(combinator)
    _check_operand(left)
    _check_operand(right)
    composite = CompositeSelector(_as_selector(left), symbol, _as_selector(right))
    _log.debug("Combined selectors with %r", symbol.value)
    return composite


def stringify(
    selector: Selector | SelectorChain, options: RenderOptions | None = None
) -> str:
    """Render a selector or chain to CSS text; a chain is finalized first."""
    if isinstance(selector, SelectorChain):
        selector = selector.finalize()
    return _render(selector, options)


class SelectorBuilder:
    """Entry point for building selectors.

    Args:
        config: Builder options; defaults to :class:`BuilderConfig`.
        logger: Logger for chain events; defaults to ``cssbuilder``.
    """

    def __init__(
        self,
        config: BuilderConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or BuilderConfig()
        self._log = logger or _log

    def start(self) -> SelectorChain:
        """Start a new, empty chain."""
        chain = SelectorChain(logger=self._log)
        self._log.debug("Started selector chain %#x", id(chain))
        return chain

    def element(self, value: str) -> SelectorChain:
        return self.start().element(value)

    def id(self, value: str) -> SelectorChain:
        return self.start().id(value)

    def class_(self, value: str) -> SelectorChain:
        return self.start().class_(value)

    def attr(self, value: str) -> SelectorChain:
        return self.start().attr(value)

    def pseudo_class(self, value: str) -> SelectorChain:
        return self.start().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorChain:
        return self.start().pseudo_element(value)

    def combine(
        self,
        left: Selector | SelectorChain,
        combinator: Combinator | str,
        right: Selector | SelectorChain,
    ) -> CompositeSelector:
        return combine(left, combinator, right)

    def stringify(
        self,
        selector: Selector | SelectorChain,
        options: RenderOptions | None = None,
    ) -> str:
        return stringify(selector, options or self.config.render_options())
