# screen_layout/domain/services/i_region_crop_service.py

"""
Region crop service interface for cutting layout regions out of frames.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from screen_layout.domain.common.result import Result
from screen_layout.domain.models.rectangle_model import Rectangle
from screen_layout.domain.models.resolution_model import Resolution


class IRegionCropService(ABC):
    """Service for cutting layout regions out of captured frames."""

    @abstractmethod
    def crop_region(self, image: Any, rect: Rectangle) -> Result[Any]:
        """
        Crop a single rectangle out of an image.

        Args:
            image: Captured frame
            rect: Area to crop, in pixels from the top-left corner

        Returns:
            Result containing the cropped image on success
        """
        pass

    @abstractmethod
    def crop_resolution(self, image: Any, resolution: Resolution) -> Result[Dict[str, Any]]:
        """
        Crop every region of a resolution.

        Args:
            image: Captured frame
            resolution: Layout whose regions are cropped

        Returns:
            Result containing the cropped images keyed by region name, or the
            first failure with the region name in its details
        """
        pass
