# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


def init_logging(level=logging.INFO):
    """Sets up logging for applications using mergepatch.

    The library itself never configures handlers, call this
    from entry points (if __name__ == "__main__") that want to
    see mergepatch log records on stderr.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)
    set_mergepatch_log_level(level)


def set_mergepatch_log_level(level, set_main=False):
    """Set a log level for mergepatch loggers"""
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('mergepatch')
logger.addHandler(logging.NullHandler())

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
