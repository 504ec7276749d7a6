# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class DeltaFormatError(ValueError):
    pass


class InvalidOperation(DeltaFormatError):
    "A delta operation has an unknown tag or malformed fields."


class OutOfRange(DeltaFormatError, IndexError):
    "A retain or remove runs past the end of the base string."


class NotFound(KeyError):
    "A record loader could not resolve an id."

    def __init__(self, id):
        super(NotFound, self).__init__(id)
        self.id = id

    def __str__(self):
        return "record not found: %r" % (self.id,)


def init_logging(level=logging.INFO):
    """Sets up logging for applications embedding notedelta.

    Sets the log level for all notedelta loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_notedelta_log_level(level, set_main=True):
    """Set a log level for notedelta loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('notedelta')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
