"""Tests for the shape models."""

import math

import pytest

from objtasks.model import Circle, Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area() == 200

    def test_area_is_per_instance(self):
        first = Rectangle(2, 3)
        second = Rectangle(4, 5)
        assert first.area() == 6
        assert second.area() == 20

    def test_to_dict(self):
        assert Rectangle(10, 20).to_dict() == {"width": 10, "height": 20}

    def test_from_dict_uses_names(self):
        r = Rectangle.from_dict({"height": 20, "width": 10})
        assert r == Rectangle(width=10, height=20)

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            Rectangle.from_dict({"width": 10})

    def test_from_dict_converts_numeric_strings(self):
        r = Rectangle.from_dict({"width": "10", "height": 2})
        assert r.width == 10.0
        assert r.area() == 20.0

    def test_from_dict_rejects_non_numeric(self):
        with pytest.raises(ValueError):
            Rectangle.from_dict({"width": "a", "height": 2})

    def test_from_dict_rejects_null(self):
        with pytest.raises(TypeError):
            Rectangle.from_dict({"width": None, "height": 2})

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Rectangle(1, 2).width = 3  # type: ignore[misc]


class TestCircle:
    def test_area(self):
        assert Circle(10).area() == pytest.approx(math.pi * 100)

    def test_dict_round_trip(self):
        assert Circle.from_dict(Circle(10).to_dict()) == Circle(10)

    def test_from_dict_rejects_non_numeric(self):
        with pytest.raises(ValueError):
            Circle.from_dict({"radius": "wide"})
