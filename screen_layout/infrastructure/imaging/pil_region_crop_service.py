# screen_layout/infrastructure/imaging/pil_region_crop_service.py
"""
Pillow implementation of the region crop service.
"""
from typing import Dict

from PIL import Image

from screen_layout.domain.services.i_region_crop_service import IRegionCropService
from screen_layout.domain.services.i_logger_service import ILoggerService
from screen_layout.domain.models.rectangle_model import Rectangle
from screen_layout.domain.models.resolution_model import Resolution
from screen_layout.domain.common.result import Result
from screen_layout.domain.common.errors import ResourceError


class PilRegionCropService(IRegionCropService):
    """
    Crops layout regions out of PIL images.

    Rectangles are used as given. Areas outside the image come back filled
    the way Pillow fills them, and Pillow errors (e.g. a negative width)
    become ResourceError failures.
    """

    def __init__(self, logger: ILoggerService):
        self.logger = logger

    def crop_region(self, image: Image.Image, rect: Rectangle) -> Result[Image.Image]:
        box = (rect.left, rect.top, rect.left + rect.width, rect.top + rect.height)
        return Result.from_operation(
            lambda: image.crop(box),
            self.logger,
            ResourceError,
            "Failed to crop region",
            box=box
        )

    def crop_resolution(self, image: Image.Image, resolution: Resolution) -> Result[Dict[str, Image.Image]]:
        self.logger.debug(f"Cropping {len(Resolution.REGION_NAMES)} regions from image",
                          size=image.size)

        crops = {}
        for name, rect in resolution.regions().items():
            result = self.crop_region(image, rect)
            if result.is_failure:
                error = result.error
                return Result.fail(ResourceError(
                    message=f"Failed to crop region '{name}': {error.message}",
                    details={**error.details, "region": name},
                    inner_error=error.inner_error
                ))
            crops[name] = result.value

        return Result.ok(crops)
