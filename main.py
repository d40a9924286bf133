#!/usr/bin/env python3
"""
Print the regions of a layout profile.

Usage: main.py [config_file] [profile_name]

Without a profile name the configured default profile is used.
"""
import sys

from screen_layout.application.app import initialize_app
from screen_layout.domain.services.i_layout_config_repository import ILayoutConfigRepository
from screen_layout.domain.services.i_logger_service import ILoggerService


def main(argv) -> int:
    config_file = argv[1] if len(argv) > 1 else None
    container = initialize_app(config_file)
    logger = container.resolve(ILoggerService)
    config_repo = container.resolve(ILayoutConfigRepository)

    if len(argv) > 2:
        result = config_repo.get_resolution(argv[2])
    else:
        result = config_repo.get_default_resolution()

    if result.is_failure:
        logger.error(str(result.error))
        return 1

    for name, rect in result.value.regions().items():
        logger.info(f"{name}: left={rect.left} top={rect.top} width={rect.width} height={rect.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
