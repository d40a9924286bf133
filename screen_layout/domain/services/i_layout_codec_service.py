# screen_layout/domain/services/i_layout_codec_service.py

"""
Layout codec interface for converting layout models to plain data.

Defines the contract for turning Rectangles and Resolutions into key-value
and JSON forms and parsing them back.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from screen_layout.domain.common.result import Result
from screen_layout.domain.models.rectangle_model import Rectangle
from screen_layout.domain.models.resolution_model import Resolution


class ILayoutCodecService(ABC):
    """Converts layout models to and from plain key-value and JSON forms."""

    @abstractmethod
    def rectangle_to_dict(self, rect: Rectangle) -> Dict[str, Any]:
        """
        Convert a rectangle to a plain mapping.

        Args:
            rect: Rectangle to convert

        Returns:
            Mapping with the keys left, top, width and height
        """
        pass

    @abstractmethod
    def rectangle_from_dict(self, data: Any) -> Result[Rectangle]:
        """
        Build a rectangle from a plain mapping.

        Args:
            data: Mapping holding exactly the four rectangle fields

        Returns:
            Result containing the Rectangle, or a ValidationError naming the
            missing, unexpected or non-numeric keys
        """
        pass

    @abstractmethod
    def resolution_to_dict(self, resolution: Resolution) -> Dict[str, Dict[str, Any]]:
        """
        Convert a resolution to nested plain mappings.

        Args:
            resolution: Resolution to convert

        Returns:
            Mapping of region name to rectangle mapping
        """
        pass

    @abstractmethod
    def resolution_from_dict(self, data: Any) -> Result[Resolution]:
        """
        Build a resolution from nested plain mappings.

        Args:
            data: Mapping holding exactly the five region names

        Returns:
            Result containing the Resolution, or a ValidationError whose
            details name the offending region
        """
        pass

    @abstractmethod
    def resolution_to_json(self, resolution: Resolution, indent: Optional[int] = None) -> Result[str]:
        """
        Encode a resolution as JSON text.

        Args:
            resolution: Resolution to encode
            indent: Optional indentation passed to the JSON encoder

        Returns:
            Result containing the JSON text
        """
        pass

    @abstractmethod
    def resolution_from_json(self, text: str) -> Result[Resolution]:
        """
        Parse a resolution from JSON text.

        Args:
            text: JSON text of a resolution mapping

        Returns:
            Result containing the Resolution, or a ValidationError for
            malformed JSON or mismatched fields
        """
        pass
