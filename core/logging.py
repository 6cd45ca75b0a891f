import logging
import sys

from core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(module)s] %(message)s"


def setup_logger(name: str = "bracket") -> logging.Logger:
    """Configure the shared application logger once and return it"""
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(settings.log_level)
    log.propagate = False
    return log


logger = setup_logger()
