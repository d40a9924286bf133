# screen_layout/domain/services/i_layout_config_repository.py
"""
Read-only access to named layout profiles.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from screen_layout.domain.common.result import Result
from screen_layout.domain.models.resolution_model import Resolution


class ILayoutConfigRepository(ABC):
    """Repository of Resolution profiles keyed by name."""

    @abstractmethod
    def load_config(self, force_reload: bool = False) -> Result[Dict[str, Any]]:
        """
        Load the raw configuration.

        Args:
            force_reload: Bypass the cache even if the source is unchanged

        Returns:
            Result containing the configuration dictionary
        """
        pass

    @abstractmethod
    def get_profile_names(self) -> Result[List[str]]:
        """Names of all configured profiles, sorted."""
        pass

    @abstractmethod
    def get_resolution(self, name: str) -> Result[Resolution]:
        """Get the Resolution stored under a profile name."""
        pass

    @abstractmethod
    def get_default_resolution(self) -> Result[Resolution]:
        """Get the profile marked as default, or the only profile if there is one."""
        pass
