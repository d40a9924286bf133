# screen_layout/infrastructure/serialization/json_layout_codec.py
"""
JSON implementation of the layout codec.

The plain form of a Rectangle is a mapping of its four numeric fields; the
plain form of a Resolution maps each of its five region names to a
Rectangle mapping. Parsing is strict: the key sets must match exactly.
"""
import json
import math
from collections.abc import Mapping
from typing import Any, Dict, Optional

from screen_layout.domain.services.i_layout_codec_service import ILayoutCodecService
from screen_layout.domain.services.i_logger_service import ILoggerService
from screen_layout.domain.models.rectangle_model import Rectangle
from screen_layout.domain.models.resolution_model import Resolution
from screen_layout.domain.common.result import Result
from screen_layout.domain.common.errors import ValidationError


class JsonLayoutCodecService(ILayoutCodecService):
    """Layout codec producing plain dicts and JSON text."""

    def __init__(self, logger: ILoggerService):
        self.logger = logger

    def rectangle_to_dict(self, rect: Rectangle) -> Dict[str, Any]:
        return rect.to_dict()

    def resolution_to_dict(self, resolution: Resolution) -> Dict[str, Dict[str, Any]]:
        return resolution.to_dict()

    def rectangle_from_dict(self, data: Any) -> Result[Rectangle]:
        key_check = self._check_keys(data, Rectangle.FIELD_NAMES, "Rectangle")
        if key_check.is_failure:
            return Result.fail(key_check.error)

        non_numeric = [name for name in Rectangle.FIELD_NAMES if not self._is_number(data[name])]
        if non_numeric:
            return Result.fail(ValidationError(
                message=f"Rectangle fields must be finite numbers: {', '.join(non_numeric)}",
                details={"invalid": non_numeric}
            ))

        return Result.ok(Rectangle(**{name: data[name] for name in Rectangle.FIELD_NAMES}))

    def resolution_from_dict(self, data: Any) -> Result[Resolution]:
        key_check = self._check_keys(data, Resolution.REGION_NAMES, "Resolution")
        if key_check.is_failure:
            return Result.fail(key_check.error)

        regions = {}
        for name in Resolution.REGION_NAMES:
            rect_result = self.rectangle_from_dict(data[name])
            if rect_result.is_failure:
                error = rect_result.error
                return Result.fail(ValidationError(
                    message=f"Invalid region '{name}': {error.message}",
                    details={**error.details, "region": name},
                    inner_error=error.inner_error
                ))
            regions[name] = rect_result.value

        return Result.ok(Resolution(**regions))

    def resolution_to_json(self, resolution: Resolution, indent: Optional[int] = None) -> Result[str]:
        return Result.from_operation(
            lambda: json.dumps(self.resolution_to_dict(resolution), indent=indent),
            self.logger,
            ValidationError,
            "Failed to encode resolution"
        )

    def resolution_from_json(self, text: str) -> Result[Resolution]:
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            self.logger.warning(f"Rejected malformed layout JSON: {e}")
            return Result.fail(ValidationError(
                message=f"Malformed layout JSON: {e}",
                inner_error=e
            ))
        return self.resolution_from_dict(data)

    def _check_keys(self, data: Any, expected: tuple, type_name: str) -> Result[bool]:
        if not isinstance(data, Mapping):
            return Result.fail(ValidationError(
                message=f"{type_name} data must be a mapping, got {type(data).__name__}",
                details={"type": type(data).__name__}
            ))

        missing = [key for key in expected if key not in data]
        unexpected = sorted(str(key) for key in data if key not in expected)
        if missing or unexpected:
            parts = []
            if missing:
                parts.append(f"missing {', '.join(missing)}")
            if unexpected:
                parts.append(f"unexpected {', '.join(unexpected)}")
            return Result.fail(ValidationError(
                message=f"{type_name} fields do not match: {'; '.join(parts)}",
                details={"missing": missing, "unexpected": unexpected}
            ))

        return Result.ok(True)

    @staticmethod
    def _is_number(value: Any) -> bool:
        # bool is an int subclass but not a coordinate; NaN and inf have no JSON form
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return not isinstance(value, float) or math.isfinite(value)
