"""
Tests for the JSON layout codec.
"""
import json
from unittest.mock import Mock

import pytest

from screen_layout.domain.common.errors import ErrorCategory
from screen_layout.domain.models.rectangle_model import Rectangle
from screen_layout.domain.models.resolution_model import Resolution
from screen_layout.domain.services.i_logger_service import ILoggerService
from screen_layout.infrastructure.serialization.json_layout_codec import JsonLayoutCodecService


@pytest.fixture
def codec():
    return JsonLayoutCodecService(Mock(spec=ILoggerService))


@pytest.fixture
def resolution():
    return Resolution(
        full=Rectangle(0, 0, 1280, 720),
        preview=Rectangle(920, 133, 160, 373),
        piece=Rectangle(507, 93, 267, 533),
        stats=Rectangle(200, 133, 240, 333),
        set=Rectangle(200, 507, 240, 120.5),
    )


class TestRectangleParsing:

    def test_valid_rectangle(self, codec):
        result = codec.rectangle_from_dict({"left": 0, "top": 0, "width": 1920, "height": 1080})
        assert result.is_success
        assert result.value == Rectangle(0, 0, 1920, 1080)

    def test_missing_field(self, codec):
        result = codec.rectangle_from_dict({"left": 0, "top": 0, "width": 10})
        assert result.is_failure
        assert result.error.category == ErrorCategory.VALIDATION
        assert result.error.details["missing"] == ["height"]

    def test_unexpected_field(self, codec):
        result = codec.rectangle_from_dict({"left": 0, "top": 0, "width": 1, "height": 1, "depth": 3})
        assert result.is_failure
        assert result.error.details["unexpected"] == ["depth"]

    @pytest.mark.parametrize("bad_value", ["10", None, True, [1]])
    def test_non_numeric_field(self, codec, bad_value):
        result = codec.rectangle_from_dict({"left": 0, "top": bad_value, "width": 1, "height": 1})
        assert result.is_failure
        assert result.error.details["invalid"] == ["top"]

    @pytest.mark.parametrize("bad_value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_field(self, codec, bad_value):
        result = codec.rectangle_from_dict({"left": bad_value, "top": 0, "width": 1, "height": 1})
        assert result.is_failure
        assert result.error.details["invalid"] == ["left"]

    def test_non_mapping(self, codec):
        result = codec.rectangle_from_dict([0, 0, 1, 1])
        assert result.is_failure
        assert result.error.details["type"] == "list"

    def test_negative_size_is_accepted(self, codec):
        result = codec.rectangle_from_dict({"left": 0, "top": 0, "width": -4, "height": 0})
        assert result.value.width == -4


class TestResolutionParsing:

    def test_dict_round_trip(self, codec, resolution):
        data = codec.resolution_to_dict(resolution)
        assert codec.resolution_from_dict(data).value == resolution

    def test_json_round_trip(self, codec, resolution):
        text = codec.resolution_to_json(resolution, indent=2).value
        assert json.loads(text)["piece"] == {"left": 507, "top": 93, "width": 267, "height": 533}
        assert codec.resolution_from_json(text).value == resolution

    @pytest.mark.parametrize("missing", ["full", "preview", "piece", "stats", "set"])
    def test_missing_region_rejected(self, codec, resolution, missing):
        data = codec.resolution_to_dict(resolution)
        del data[missing]
        result = codec.resolution_from_dict(data)
        assert result.is_failure
        assert result.error.details["missing"] == [missing]

    def test_nested_error_names_region(self, codec, resolution):
        data = codec.resolution_to_dict(resolution)
        del data["stats"]["width"]
        result = codec.resolution_from_dict(data)
        assert result.is_failure
        assert result.error.details["region"] == "stats"
        assert result.error.details["missing"] == ["width"]
        assert "stats" in result.error.message

    def test_malformed_json(self, codec):
        result = codec.resolution_from_json("{not json")
        assert result.is_failure
        assert result.error.category == ErrorCategory.VALIDATION
        codec.logger.warning.assert_called_once()

    def test_json_array_rejected(self, codec):
        assert codec.resolution_from_json("[]").is_failure
