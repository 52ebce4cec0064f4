import logging
import logging.config
import sys
from typing import Optional


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the dashboard process

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    formatters = {
        'detailed': {
            'format': '[%(asctime)s] %(levelname)-8s %(name)-35s | %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S'
        },
    }

    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'level': log_level,
            'formatter': 'detailed',
            'stream': sys.stderr
        }
    }

    loggers = {
        '': {
            'level': log_level,
            'handlers': ['console']
        },
        # httpx logs every request at INFO
        'httpx': {
            'level': 'WARNING',
            'handlers': ['console'],
            'propagate': False
        },
        'municipal_dashboard': {
            'level': log_level,
            'handlers': ['console'],
            'propagate': False
        },
    }

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': formatters,
        'handlers': handlers,
        'loggers': loggers
    }

    logging.config.dictConfig(config)

    logger = logging.getLogger('municipal_dashboard')
    logger.debug(f"Logging configured with level: {log_level}")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance

    Args:
        name: Logger name. Defaults to the package logger
    """
    return logging.getLogger(name or 'municipal_dashboard')
