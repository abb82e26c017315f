import logging
from splitledger.core.config import settings

LOG_FORMAT = "Splitledger : %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | None = None):
    """
    Attach a stream handler to the package logger.

    Left to the caller; importing the library never configures logging.
    """
    logger = logging.getLogger("splitledger")
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not any(getattr(h, "_splitledger", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._splitledger = True
        logger.addHandler(handler)

    return logger
