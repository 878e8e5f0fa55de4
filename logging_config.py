# logging_config.py

import logging
import logging.config


def setup_logging(level='INFO'):
    """Настройка логирования приложения"""
    LOGGING_CONFIG = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {  # Root logger
                "handlers": ["console"],
                "level": level,
            },
            "sqlalchemy.engine": {
                "level": "WARNING",
            },
        },
    }

    logging.config.dictConfig(LOGGING_CONFIG)
    return logging.getLogger(__name__)
