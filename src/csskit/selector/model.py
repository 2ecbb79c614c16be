"""Selector model: an immutable, chainable CSS selector builder.

A compound selector is assembled from up to six kinds of fragment, which must
be supplied in grammar order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/      \\----------/
              can repeat   can repeat

Every factory method returns a new ``Selector``; the receiver is never
modified, so any intermediate selector can be reused as a branch point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum

from csskit.selector.errors import OrderViolation

__all__ = ["SINGLE_OCCURRENCE", "Selector", "Stage"]

logger = logging.getLogger(__name__)


class Stage(IntEnum):
    """Fragment kinds in the order they must appear in a selector."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


SINGLE_OCCURRENCE = frozenset({Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT})


@dataclass(frozen=True)
class Selector:
    """Accumulated fragments of a single CSS selector.

    Attributes:
        element_part: Type selector, or the rendered text of a combined selector.
        id_part: Id without the leading ``#``.
        class_parts: Class names in insertion order, without the leading ``.``.
        attribute_part: Attribute expression without the brackets.
        pseudo_class_parts: Pseudo-classes in insertion order, without ``:``.
        pseudo_element_part: Pseudo-element without the leading ``::``.
    """

    element_part: str = ""
    id_part: str = ""
    class_parts: tuple[str, ...] = ()
    attribute_part: str = ""
    pseudo_class_parts: tuple[str, ...] = ()
    pseudo_element_part: str = ""

    # --- state ----------------------------------------------------------------

    def is_populated(self, stage: Stage) -> bool:
        """True if a fragment of *stage* has been supplied."""
        if stage is Stage.ELEMENT:
            return bool(self.element_part)
        if stage is Stage.ID:
            return bool(self.id_part)
        if stage is Stage.CLASS:
            return bool(self.class_parts)
        if stage is Stage.ATTRIBUTE:
            return bool(self.attribute_part)
        if stage is Stage.PSEUDO_CLASS:
            return bool(self.pseudo_class_parts)
        return bool(self.pseudo_element_part)

    @property
    def highest_stage(self) -> Stage | None:
        """The latest populated stage, or None for an empty selector."""
        for stage in reversed(Stage):
            if self.is_populated(stage):
                return stage
        return None

    def _check(self, stage: Stage, value: str) -> None:
        """Raise OrderViolation if a *stage* fragment may not be added now."""
        if stage in SINGLE_OCCURRENCE and self.is_populated(stage):
            logger.debug("Rejected duplicate %s fragment %r", stage.name, value)
            raise OrderViolation(stage, duplicate=True)
        highest = self.highest_stage
        if highest is not None and highest > stage:
            logger.debug(
                "Rejected %s fragment %r after %s", stage.name, value, highest.name
            )
            raise OrderViolation(stage)

    # --- fragment factories ---------------------------------------------------

    def element(self, value: str) -> Selector:
        self._check(Stage.ELEMENT, value)
        return replace(self, element_part=value)

    def id(self, value: str) -> Selector:
        self._check(Stage.ID, value)
        return replace(self, id_part=value)

    def class_(self, value: str) -> Selector:
        self._check(Stage.CLASS, value)
        if not value:
            return replace(self)
        return replace(self, class_parts=self.class_parts + (value,))

    def attr(self, value: str) -> Selector:
        """Set the attribute fragment, replacing any previous one."""
        self._check(Stage.ATTRIBUTE, value)
        return replace(self, attribute_part=value)

    def pseudo_class(self, value: str) -> Selector:
        self._check(Stage.PSEUDO_CLASS, value)
        if not value:
            return replace(self)
        return replace(self, pseudo_class_parts=self.pseudo_class_parts + (value,))

    def pseudo_element(self, value: str) -> Selector:
        self._check(Stage.PSEUDO_ELEMENT, value)
        return replace(self, pseudo_element_part=value)

    # --- combination ----------------------------------------------------------

    @staticmethod
    def combine(left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors with a combinator (``' '``, ``+``, ``~`` or ``>``).

        The result is opaque: its rendered text is held as the element part
        and all other fragments are empty. The combinator is not validated.
        """
        return Selector(
            element_part=f"{left.stringify()} {combinator} {right.stringify()}"
        )

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector as CSS text."""
        parts = [self.element_part]
        if self.id_part:
            parts.append(f"#{self.id_part}")
        parts.extend(f".{name}" for name in self.class_parts)
        if self.attribute_part:
            parts.append(f"[{self.attribute_part}]")
        parts.extend(f":{name}" for name in self.pseudo_class_parts)
        if self.pseudo_element_part:
            parts.append(f"::{self.pseudo_element_part}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()
