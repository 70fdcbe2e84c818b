"""Console and file logging for applications built on svgplot.

The library modules only create ``svgplot.*`` loggers and log at debug
level; nothing is printed until an application calls
:func:`setup_logging`.
"""

import logging
import sys

LOGGER_NAME = 'svgplot'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


## drop (and close) whatever handlers an earlier call installed
def _remove_handlers(logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(level=logging.INFO, log_file=None):
    """Send ``svgplot`` log records at ``level`` and above to stdout, and
    also to ``log_file`` when one is given (the file is overwritten).

    Calling it again replaces the previous handlers.  Returns the
    package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    _remove_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(str(log_file), mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug('logging to %s', 'stdout and {}'.format(log_file) if log_file else 'stdout')
    return logger


__all__ = [
    'LOGGER_NAME',
    'setup_logging',
]
