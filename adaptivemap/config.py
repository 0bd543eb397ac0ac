"""
Configuration defaults for adaptivemap.

Defaults are read once at import time and can be overridden through the
environment:

    ADAPTIVEMAP_BUCKET_CAPACITY   number of buckets in a new map (default 30)
    ADAPTIVEMAP_TREE_THRESHOLD    chain length that triggers promotion (default 8)
    ADAPTIVEMAP_LOG_LEVEL         level used by configure_logging() (default WARNING)
"""

import copy
import logging.config
import os
from typing import Optional


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}")


DEFAULT_BUCKET_CAPACITY = _env_int("ADAPTIVEMAP_BUCKET_CAPACITY", 30)

DEFAULT_TREE_THRESHOLD = _env_int("ADAPTIVEMAP_TREE_THRESHOLD", 8)

LOG_LEVEL = os.getenv("ADAPTIVEMAP_LOG_LEVEL", "WARNING").upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': 'simple',
            'stream': 'ext://sys.stderr'
        }
    },
    'loggers': {
        'adaptivemap': {
            'level': LOG_LEVEL,
            'handlers': ['console'],
            'propagate': False
        }
    }
}


def configure_logging(level: Optional[str] = None) -> None:
    """Install the console handler for the ``adaptivemap`` logger tree."""
    config = copy.deepcopy(LOGGING)
    if level is not None:
        config['loggers']['adaptivemap']['level'] = level.upper()
    logging.config.dictConfig(config)
