"""
Tests for the Rectangle and Resolution models.
"""
from dataclasses import FrozenInstanceError, fields

import pytest

from screen_layout.domain.models.rectangle_model import Rectangle
from screen_layout.domain.models.resolution_model import Resolution


def make_resolution() -> Resolution:
    return Resolution(
        full=Rectangle(0, 0, 1920, 1080),
        preview=Rectangle(1380, 200, 240, 560),
        piece=Rectangle(760, 140, 400, 800),
        stats=Rectangle(300, 200, 360, 500),
        set=Rectangle(300, 760, 360, 180),
    )


class TestRectangle:

    def test_accepts_full_hd_rectangle(self):
        rect = Rectangle(left=0, top=0, width=1920, height=1080)
        assert (rect.left, rect.top, rect.width, rect.height) == (0, 0, 1920, 1080)

    def test_exposes_exactly_four_fields(self):
        assert tuple(f.name for f in fields(Rectangle)) == ("left", "top", "width", "height")
        assert Rectangle.FIELD_NAMES == ("left", "top", "width", "height")

    @pytest.mark.parametrize("missing", ["left", "top", "width", "height"])
    def test_every_field_is_required(self, missing):
        kwargs = {"left": 1, "top": 2, "width": 3, "height": 4}
        del kwargs[missing]
        with pytest.raises(TypeError):
            Rectangle(**kwargs)

    def test_is_frozen(self):
        rect = Rectangle(0, 0, 10, 10)
        with pytest.raises(FrozenInstanceError):
            rect.width = 20

    def test_value_equality_and_hash(self):
        assert Rectangle(1, 2, 3, 4) == Rectangle(1, 2, 3, 4)
        assert Rectangle(1, 2, 3, 4) != Rectangle(1, 2, 3, 5)
        assert len({Rectangle(1, 2, 3, 4), Rectangle(1, 2, 3, 4)}) == 1

    def test_negative_size_is_stored_as_given(self):
        rect = Rectangle(10, 10, -5, -1)
        assert rect.width == -5
        assert rect.height == -1

    def test_float_coordinates(self):
        rect = Rectangle(0.5, 1.25, 10.0, 20.75)
        assert rect.as_tuple() == (0.5, 1.25, 10.0, 20.75)

    def test_to_dict(self):
        assert Rectangle(5, 6, 7, 8).to_dict() == {"left": 5, "top": 6, "width": 7, "height": 8}


class TestResolution:

    def test_exposes_exactly_five_regions(self):
        expected = ("full", "preview", "piece", "stats", "set")
        assert tuple(f.name for f in fields(Resolution)) == expected
        assert Resolution.REGION_NAMES == expected

    @pytest.mark.parametrize("missing", ["full", "preview", "piece", "stats", "set"])
    def test_omitting_any_region_is_rejected(self, missing):
        kwargs = make_resolution().regions()
        del kwargs[missing]
        with pytest.raises(TypeError):
            Resolution(**kwargs)

    def test_regions_are_ordered_by_name_list(self):
        resolution = make_resolution()
        regions = resolution.regions()
        assert list(regions) == list(Resolution.REGION_NAMES)
        assert regions["set"] == Rectangle(300, 760, 360, 180)

    def test_regions_are_not_constrained_to_full(self):
        resolution = Resolution(
            full=Rectangle(0, 0, 100, 100),
            preview=Rectangle(500, 500, 50, 50),
            piece=Rectangle(0, 0, 100, 100),
            stats=Rectangle(0, 0, 100, 100),
            set=Rectangle(-10, -10, 5, 5),
        )
        assert resolution.set.left == -10

    def test_is_frozen(self):
        resolution = make_resolution()
        with pytest.raises(FrozenInstanceError):
            resolution.piece = Rectangle(0, 0, 1, 1)

    def test_to_dict_nests_rectangles(self):
        data = make_resolution().to_dict()
        assert set(data) == set(Resolution.REGION_NAMES)
        assert data["full"] == {"left": 0, "top": 0, "width": 1920, "height": 1080}
