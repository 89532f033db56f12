import logging
import os
from functools import wraps

_ROOT_LOGGER_NAME = "composer"
_SPY_LOGGER = logging.getLogger("composer.spy")


def spy_enabled() -> bool:
    val = os.getenv("COMPOSER_SPY", "0")
    return str(val).lower() not in {"", "0", "false", "no"}


def spy_trace(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if spy_enabled():
            _SPY_LOGGER.debug("Entering %s args=%r kwargs=%r", func.__qualname__, args, kwargs)
        result = func(*args, **kwargs)
        if spy_enabled():
            _SPY_LOGGER.debug("Exiting %s -> %r", func.__qualname__, result)
        return result

    return wrapper


def configure_logging(level: int = logging.WARNING) -> None:
    """
    Ensure the composer logger has a handler in case the app didn't configure logging.
    Idempotent: adds at most one handler.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
