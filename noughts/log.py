"""
Logging Setup - Configures the root logger for a game run.
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def init_logging(level=logging.WARNING, log_file=None):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT, force=True)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
