"""Tests for the Rectangle value object and the JSON helpers."""

import json

import pytest

from selectorkit.config import SelectorkitConfig
from selectorkit.objects import Rectangle, from_json, to_json


class Circle:
    def __init__(self, radius):
        self.radius = radius
        self.calls = 0

    def area(self):
        return 3 * self.radius**2


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area() == 200

    def test_area_follows_fields(self):
        r = Rectangle(2, 3)
        r.width = 5
        assert r.area() == 15


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list_is_compact(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_is_compact(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_skips_callables(self):
        obj = Circle(2)
        obj.hook = lambda: None
        assert json.loads(to_json(obj)) == {"radius": 2, "calls": 0}

    def test_indent_config(self):
        text = to_json({"a": 1}, config=SelectorkitConfig(json_indent=2))
        assert text == '{\n  "a": 1\n}'

    def test_sort_keys_config(self):
        text = to_json({"b": 1, "a": 2}, config=SelectorkitConfig(sort_keys=True))
        assert text == '{"a":2,"b":1}'

    def test_unserialisable(self):
        with pytest.raises(TypeError):
            to_json({1, 2})


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_rectangle_round_trip(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.area() == 200

    def test_constructor_not_called(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert not hasattr(c, "calls")
        assert c.area() == 300

    def test_extra_keys_kept(self):
        r = from_json(Rectangle, '{"width":1,"height":2,"color":"red"}')
        assert r.color == "red"

    def test_non_object_payload(self):
        with pytest.raises(TypeError):
            from_json(Rectangle, "[1,2,3]")

    def test_malformed(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Rectangle, "{width: 1}")
