# logger_setup.py
import logging

from thermocalc.constants import LOG_FILE_NAME, LOG_FORMAT, LOGGER_NAME


def setup_logger(level=logging.INFO, log_file=LOG_FILE_NAME):
    """Attach console (and optional file) handlers to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    # File Handler for general logs
    if log_file:
        fh = logging.FileHandler(log_file, mode='a')
        fh.setLevel(logging.INFO)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    # Console Handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    return logger


# Library code logs here; nothing is printed until an application calls setup_logger().
app_logger = logging.getLogger(LOGGER_NAME)
app_logger.addHandler(logging.NullHandler())
