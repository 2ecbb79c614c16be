from csskit.selector.builder import COMBINATORS, css_selector_builder
from csskit.selector.errors import OrderViolation
from csskit.selector.model import SINGLE_OCCURRENCE, Selector, Stage

__all__ = [
    "COMBINATORS",
    "css_selector_builder",
    "OrderViolation",
    "SINGLE_OCCURRENCE",
    "Selector",
    "Stage",
]
