# Logging setup + the debug trace helper used by the boot loop.

import logging

from utils.config import CONFIG

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

logger = logging.getLogger("wallcal")


def configure_logging(debug: bool | None = None) -> None:
    if debug is None:
        debug = CONFIG.get("debug_mode", False)
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, format=LOG_FORMAT)


def debug_log(message: str) -> None:
    if CONFIG.get("debug_mode", False):
        logger.debug("[debug] %s", message)
