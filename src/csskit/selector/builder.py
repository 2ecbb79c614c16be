"""Shared entry point for building selectors."""

from __future__ import annotations

from csskit.selector.model import Selector

__all__ = ["COMBINATORS", "css_selector_builder"]

# descendant, adjacent sibling, general sibling, child
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")

css_selector_builder = Selector()
