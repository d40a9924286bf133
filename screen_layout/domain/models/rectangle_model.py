# screen_layout/domain/models/rectangle_model.py
from dataclasses import dataclass
from typing import Dict, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned screen area: origin offset plus extent, in pixels from the top-left."""
    left: Number
    top: Number
    width: Number
    height: Number

    FIELD_NAMES = ("left", "top", "width", "height")

    def as_tuple(self) -> Tuple[Number, Number, Number, Number]:
        """Coordinates as (x, y, width, height)."""
        return self.left, self.top, self.width, self.height

    def to_dict(self) -> Dict[str, Number]:
        return {name: getattr(self, name) for name in self.FIELD_NAMES}
