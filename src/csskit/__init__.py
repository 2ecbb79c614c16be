"""csskit -- CSS selector builder and small object utilities."""

from __future__ import annotations

__version__ = "0.1.0"

from csskit.objects import ParseError, Rectangle, deserialize, make_rectangle, serialize
from csskit.selector import (
    COMBINATORS,
    OrderViolation,
    Selector,
    Stage,
    css_selector_builder,
)

__all__ = [
    "__version__",
    # selector
    "COMBINATORS",
    "OrderViolation",
    "Selector",
    "Stage",
    "css_selector_builder",
    # objects
    "ParseError",
    "Rectangle",
    "deserialize",
    "make_rectangle",
    "serialize",
]
