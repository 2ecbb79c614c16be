"""JSON helpers: compact serialisation and typed deserialisation."""

from __future__ import annotations

import dataclasses
import json
import logging
import types
from typing import Any, TypeVar

__all__ = ["ParseError", "deserialize", "serialize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ParseError(Exception):
    """Raised when text handed to deserialize() is not valid JSON."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


def _default(value: Any) -> Any:
    """Serialise objects as their data fields."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if (
        hasattr(value, "__dict__")
        and not callable(value)
        and not isinstance(value, types.ModuleType)
    ):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize(value: Any) -> str:
    """Return the compact JSON text for *value*.

    Keys keep insertion order and no whitespace is emitted between tokens.
    """
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=_default
    )


def deserialize(shape: type[T], text: str) -> T:
    """Parse *text* and return it as an instance of *shape*.

    The instance is created without calling ``shape.__init__``; the parsed
    fields become its attributes, so the methods of *shape* work on the
    parsed data.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Failed to parse JSON for %s: %s", shape.__name__, exc)
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc

    if not isinstance(data, dict):
        raise TypeError(
            f"Cannot build {shape.__name__} from JSON {type(data).__name__}; "
            "expected an object"
        )

    obj = shape.__new__(shape)
    vars(obj).update(data)
    return obj
