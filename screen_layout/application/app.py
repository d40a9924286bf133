# screen_layout/application/app.py

import os
import logging
from typing import Optional

from screen_layout.domain.common.di_container import DIContainer
from screen_layout.domain.services.i_logger_service import ILoggerService
from screen_layout.domain.services.i_layout_codec_service import ILayoutCodecService
from screen_layout.domain.services.i_layout_config_repository import ILayoutConfigRepository
from screen_layout.domain.services.i_region_crop_service import IRegionCropService

from screen_layout.infrastructure.logging.logger_service import ConsoleLoggerService, FileLoggerService
from screen_layout.infrastructure.serialization.json_layout_codec import JsonLayoutCodecService
from screen_layout.infrastructure.config.json_layout_config_repository import JsonLayoutConfigRepository
from screen_layout.infrastructure.imaging.pil_region_crop_service import PilRegionCropService

CONFIG_ENV_VAR = "SCREEN_LAYOUT_CONFIG"
DEFAULT_CONFIG_FILE = "layouts.json"


def initialize_app(config_file: Optional[str] = None,
                   log_level: int = logging.INFO,
                   log_dir: Optional[str] = None) -> DIContainer:
    """
    Build the service container.

    Args:
        config_file: Layout config path; falls back to $SCREEN_LAYOUT_CONFIG,
            then layouts.json in the working directory
        log_level: Level for the logger service
        log_dir: When given, log to a dated file in this directory as well

    Returns:
        Container with logger, codec, config repository and crop service registered
    """
    container = DIContainer()

    if log_dir:
        logger = FileLoggerService(level=log_level, log_dir=log_dir)
    else:
        logger = ConsoleLoggerService(level=log_level)
    container.register_instance(ILoggerService, logger)

    codec = JsonLayoutCodecService(logger)
    container.register_instance(ILayoutCodecService, codec)

    if config_file is None:
        config_file = os.environ.get(CONFIG_ENV_VAR) or os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
    config_repo = JsonLayoutConfigRepository(config_file, codec, logger)
    container.register_instance(ILayoutConfigRepository, config_repo)

    container.register_factory(
        IRegionCropService,
        lambda: PilRegionCropService(container.resolve(ILoggerService))
    )

    logger.debug("Application dependencies initialized", config_file=config_file)

    return container


_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    global _container
    if _container is None:
        _container = initialize_app()
    return _container
