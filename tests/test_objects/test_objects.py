"""Tests for the Rectangle value object and the JSON helpers."""

from dataclasses import dataclass

import pytest

from csskit.objects import ParseError, Rectangle, deserialize, make_rectangle, serialize


class Circle:
    def __init__(self, radius: float) -> None:
        self.radius = radius

    def diameter(self) -> float:
        return self.radius * 2


@dataclass
class Point:
    x: int
    y: int


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------


class TestRectangle:
    def test_fields(self):
        r = make_rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert make_rectangle(10, 20).area() == 200

    def test_area_uses_current_fields(self):
        r = make_rectangle(10, 20)
        r.width = 5
        assert r.area() == 100

    def test_factory_returns_rectangle(self):
        assert make_rectangle(1, 2) == Rectangle(width=1, height=2)


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_list(self):
        assert serialize([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self):
        assert serialize({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_scalars(self):
        assert serialize("text") == '"text"'
        assert serialize(None) == "null"
        assert serialize(True) == "true"

    def test_non_ascii_kept(self):
        assert serialize({"name": "café"}) == '{"name":"café"}'

    def test_dataclass_serialises_fields(self):
        assert serialize(make_rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_serialises_fields(self):
        assert serialize(Circle(10)) == '{"radius":10}'

    def test_unsupported_value(self):
        with pytest.raises(TypeError, match="not JSON serializable"):
            serialize({1, 2})

    def test_function_is_not_serialised(self):
        with pytest.raises(TypeError, match="not JSON serializable"):
            serialize({"g": lambda: 0})

    def test_module_is_not_serialised(self):
        with pytest.raises(TypeError, match="not JSON serializable"):
            serialize(pytest)

    def test_class_is_not_serialised(self):
        with pytest.raises(TypeError, match="not JSON serializable"):
            serialize(Circle)


# ---------------------------------------------------------------------------
# deserialize
# ---------------------------------------------------------------------------


class TestDeserialize:
    def test_reattaches_methods(self):
        circle = deserialize(Circle, '{"radius":10}')
        assert isinstance(circle, Circle)
        assert circle.radius == 10
        assert circle.diameter() == 20

    def test_rectangle_area(self):
        rect = deserialize(Rectangle, '{"width":10,"height":20}')
        assert rect.area() == 200
        assert rect == Rectangle(width=10, height=20)

    def test_does_not_call_init(self):
        point = deserialize(Point, '{"x":1}')
        assert point.x == 1
        assert not hasattr(point, "y")

    def test_serialize_output_deserialises(self):
        rect = deserialize(Rectangle, serialize(make_rectangle(3, 4)))
        assert rect.area() == 12

    def test_invalid_json_raises_parse_error(self):
        with pytest.raises(ParseError, match="Invalid JSON") as info:
            deserialize(Circle, '{"radius":')
        assert info.value.line == 1
        assert info.value.column == 11

    def test_parse_error_chains_cause(self):
        with pytest.raises(ParseError) as info:
            deserialize(Circle, "not json")
        assert info.value.__cause__ is not None

    def test_non_object_raises_type_error(self):
        with pytest.raises(TypeError, match="expected an object"):
            deserialize(Circle, "[1, 2, 3]")
