"""Object utilities -- public re-exports."""

from csskit.objects.json_codec import ParseError, deserialize, serialize
from csskit.objects.rectangle import Rectangle, make_rectangle

__all__ = [
    "ParseError",
    "deserialize",
    "serialize",
    "Rectangle",
    "make_rectangle",
]
