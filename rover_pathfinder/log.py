import logging
import os

from rover_pathfinder.config import LOG_LEVEL_ENV

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level=None) -> None:
    """Configure root logging for the API process (never called by the library)."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
