# screen_layout/domain/models/resolution_model.py
"""
Resolution model grouping the five layout regions of a host screen.
"""
from dataclasses import dataclass
from typing import Any, Dict

from screen_layout.domain.models.rectangle_model import Rectangle


@dataclass(frozen=True)
class Resolution:
    """
    Named layout regions for one screen resolution.

    All five regions are required. Nothing is enforced between them: a region
    may overlap another or fall outside ``full``.

    Attributes:
        full: The entire available area
        preview: Area showing the upcoming item preview
        piece: Area showing the current piece
        stats: Area showing statistics
        set: Area showing the set display
    """
    full: Rectangle
    preview: Rectangle
    piece: Rectangle
    stats: Rectangle
    set: Rectangle

    REGION_NAMES = ("full", "preview", "piece", "stats", "set")

    def regions(self) -> Dict[str, Rectangle]:
        """Regions keyed by name, in REGION_NAMES order."""
        return {name: getattr(self, name) for name in self.REGION_NAMES}

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: rect.to_dict() for name, rect in self.regions().items()}
