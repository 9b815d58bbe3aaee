"""cssbuilder: chainable builder for CSS compound selectors and combinators."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.builder import (
    ChainState,
    SelectorBuilder,
    SelectorChain,
    combine,
    stringify,
)
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import (
    ChainClosedError,
    DuplicateUniquePartError,
    EmptyPartValueError,
    InvalidCombinatorError,
    OutOfOrderPartError,
    SelectorError,
)
from cssbuilder.model import (
    Combinator,
    CompositeSelector,
    PartKind,
    Selector,
    SelectorPart,
    SimpleSelector,
)
from cssbuilder.render import RenderOptions

# Shared default builder; it holds no chain state.
builder = SelectorBuilder()

__all__ = [
    "__version__",
    "builder",
    # Builder
    "SelectorBuilder",
    "SelectorChain",
    "ChainState",
    "combine",
    "stringify",
    "RenderOptions",
    "BuilderConfig",
    # Model
    "PartKind",
    "Combinator",
    "SelectorPart",
    "SimpleSelector",
    "CompositeSelector",
    "Selector",
    # Errors
    "SelectorError",
    "DuplicateUniquePartError",
    "OutOfOrderPartError",
    "InvalidCombinatorError",
    "EmptyPartValueError",
    "ChainClosedError",
]
