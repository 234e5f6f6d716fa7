"""
Logging setup for the calculator modules.

Every module logs to a child of the ``bmi_tips`` logger. Streamlit executes
app.py again on each interaction, so ``setup_logging`` is called many times
per session and must replace, not stack, its handlers.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "bmi_tips"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _drop_handlers(logger: logging.Logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler, and a file handler when ``log_file`` is given,
    to the ``bmi_tips`` logger. Handlers from a previous call are closed.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    _drop_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
