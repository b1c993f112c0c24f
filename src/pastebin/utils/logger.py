import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"

_configured: set = set()


def setup_logger(level: str = "INFO", name: str = "pastebin") -> logging.Logger:
    """Point the pastebin logger at uvicorn's error log, or stdout without it.

    Call once uvicorn has configured logging (the app does it at startup).
    Repeat calls only change the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    if name in _configured:
        return logger

    uvicorn_handlers = logging.getLogger("uvicorn.error").handlers
    if uvicorn_handlers:
        logger.handlers[:] = list(uvicorn_handlers)
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.handlers[:] = [handler]
    logger.propagate = False
    _configured.add(name)
    return logger
