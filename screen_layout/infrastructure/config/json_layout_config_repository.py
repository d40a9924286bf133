# screen_layout/infrastructure/config/json_layout_config_repository.py

"""
JSON-file implementation of the layout configuration repository.

Expected file shape::

    {
        "default_resolution": "1920x1080",
        "resolutions": {
            "1920x1080": {"full": {...}, "preview": {...}, ...}
        }
    }

The file is only ever read.
"""
import os
import copy
import json
import threading
from typing import Any, Dict, List, Optional

from screen_layout.domain.services.i_layout_config_repository import ILayoutConfigRepository
from screen_layout.domain.services.i_layout_codec_service import ILayoutCodecService
from screen_layout.domain.services.i_logger_service import ILoggerService
from screen_layout.domain.models.resolution_model import Resolution
from screen_layout.domain.common.result import Result
from screen_layout.domain.common.errors import ConfigurationError, ValidationError


class JsonLayoutConfigRepository(ILayoutConfigRepository):
    """
    Loads layout profiles from a JSON file.

    The parsed file is cached and reloaded when its modification time changes.
    """

    RESOLUTIONS_KEY = "resolutions"
    DEFAULT_KEY = "default_resolution"

    def __init__(self, config_file: str, codec: ILayoutCodecService, logger: ILoggerService):
        """
        Args:
            config_file: Path to the JSON configuration file
            codec: Codec used to parse profile entries
            logger: Logger service
        """
        self.config_file = config_file
        self.codec = codec
        self.logger = logger
        self._config_cache: Optional[Dict[str, Any]] = None
        self._last_modified = 0.0
        self._lock = threading.RLock()

    def load_config(self, force_reload: bool = False) -> Result[Dict[str, Any]]:
        # Callers get their own copy; the cache is shared by the lookups below
        return self._cached_config(force_reload).map(copy.deepcopy)

    def _cached_config(self, force_reload: bool = False) -> Result[Dict[str, Any]]:
        with self._lock:
            if not os.path.exists(self.config_file):
                return Result.fail(ConfigurationError(
                    message=f"Layout config file not found: {self.config_file}",
                    details={"path": self.config_file}
                ))

            mtime = os.path.getmtime(self.config_file)
            if self._config_cache is not None and not force_reload and mtime <= self._last_modified:
                return Result.ok(self._config_cache)

            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    config = json.load(f)
            except (OSError, ValueError) as e:
                error = ConfigurationError(
                    message=f"Error loading layout config: {e}",
                    details={"path": self.config_file},
                    inner_error=e
                )
                self.logger.error(str(error))
                return Result.fail(error)

            if not isinstance(config, dict):
                return Result.fail(ConfigurationError(
                    message="Layout config must be a JSON object",
                    details={"path": self.config_file}
                ))

            resolutions = config.setdefault(self.RESOLUTIONS_KEY, {})
            if not isinstance(resolutions, dict):
                return Result.fail(ConfigurationError(
                    message=f"'{self.RESOLUTIONS_KEY}' must be a JSON object",
                    details={"path": self.config_file}
                ))

            self.logger.info(f"Layout config loaded from {self.config_file}",
                             profiles=len(resolutions))
            self._config_cache = config
            self._last_modified = mtime
            return Result.ok(config)

    def get_profile_names(self) -> Result[List[str]]:
        return self._cached_config().map(lambda config: sorted(config[self.RESOLUTIONS_KEY]))

    def get_resolution(self, name: str) -> Result[Resolution]:
        config_result = self._cached_config()
        if config_result.is_failure:
            return Result.fail(config_result.error)

        resolutions = config_result.value[self.RESOLUTIONS_KEY]
        if name not in resolutions:
            return Result.fail(ValidationError(
                message=f"Resolution profile not found: {name}",
                details={"name": name, "available": sorted(resolutions)}
            ))

        result = self.codec.resolution_from_dict(resolutions[name])
        if result.is_failure:
            self.logger.warning(f"Invalid resolution profile {name}: {result.error.message}")
        return result

    def get_default_resolution(self) -> Result[Resolution]:
        config_result = self._cached_config()
        if config_result.is_failure:
            return Result.fail(config_result.error)

        config = config_result.value
        name = config.get(self.DEFAULT_KEY)
        if name is None:
            names = list(config[self.RESOLUTIONS_KEY])
            if len(names) != 1:
                return Result.fail(ConfigurationError(
                    message=f"No '{self.DEFAULT_KEY}' set and {len(names)} profiles configured",
                    details={"profiles": sorted(names)}
                ))
            name = names[0]
        elif not isinstance(name, str):
            return Result.fail(ConfigurationError(
                message=f"'{self.DEFAULT_KEY}' must be a profile name string",
                details={self.DEFAULT_KEY: name}
            ))

        return self.get_resolution(name)
