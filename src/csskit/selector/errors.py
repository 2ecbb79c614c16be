"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from csskit.selector.model import Stage

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class OrderViolation(Exception):
    """Raised when a fragment is added twice or out of grammar order."""

    def __init__(self, stage: Stage, duplicate: bool = False):
        self.stage = stage
        self.duplicate = duplicate
        super().__init__(DUPLICATE_MESSAGE if duplicate else ORDER_MESSAGE)
