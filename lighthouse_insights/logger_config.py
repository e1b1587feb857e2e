import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str = "lighthouse_insights",
                 log_file: str | None = None, level: int | str | None = None) -> logging.Logger:
    """Configure the package logger once; later calls return it unchanged.

    Level and file default to the LOG_LEVEL and LOG_FILE environment variables.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = level or os.environ.get("LOG_LEVEL", "INFO").upper()
    log_file = log_file or os.environ.get("LOG_FILE")
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
