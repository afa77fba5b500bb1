import logging
import logging.handlers
import os
import sys

from densematrix import config


_loggers = {}


def get_logger(name="densematrix"):
    logger = logging.getLogger(name)
    logger.setLevel(config.LOG_LEVEL)
    if len(logger.handlers) == 0:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(asctime)s: %(message)s")
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
        if config.SHOULD_LOG:
            os.makedirs(os.path.dirname(config.LOG_FILE_NAME) or ".", exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                config.LOG_FILE_NAME, backupCount=20, maxBytes=5242880)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    _loggers[name] = logger
    return logger


def set_level(level):
    """Changes the level of every logger created through get_logger."""
    for logger in _loggers.values():
        logger.setLevel(level)
