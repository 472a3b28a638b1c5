"""Entry point for pydevfile."""

import logging
import sys

from .config.loader import ConfigLoader
from .data import DevfileError
from .parser import parse_and_validate

logger = logging.getLogger(__name__)


def main():
    """Parse a devfile and log a summary of it."""
    loader = ConfigLoader()
    settings = loader.load().settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Get devfile path from command line or use the configured default
    devfile_path = loader.get_devfile_path(
        settings, sys.argv[1] if len(sys.argv) > 1 else None
    )
    logger.info(f"Parsing devfile from {devfile_path}")

    try:
        devfile = parse_and_validate(
            devfile_path, substitute_variables=settings.substitute_variables
        )
    except DevfileError as e:
        logger.error(str(e))
        return 1

    data = devfile.data
    logger.info(f"Devfile schema version: {data.get_schema_version()}")

    try:
        variables = data.get_top_level_variables()
        logger.info(f"Top-level variable keys: {', '.join(variables) or '(none)'}")
    except DevfileError as e:
        logger.info(str(e))

    for component in data.get_devfile_container_components():
        container = component.container
        logger.info(
            f"Container component {component.name}: image={container.image} "
            f"memoryLimit={container.memoryLimit or '-'}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
