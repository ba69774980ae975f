#!/usr/bin/env python3
#
# @file    logger.py
# @brief   Simple wrapper around the Python logging module
# @author  Michael Hucka
#
# <!---------------------------------------------------------------------------
# Copyright (C) 2015 by the California Institute of Technology.
# This software is part of CASICS, the Comprehensive and Automated Software
# Inventory Creation System.  For more information, visit http://casics.org.
# ------------------------------------------------------------------------- -->

import logging
import sys


# Global constants.
# .............................................................................

_default_name   = 'spiral'
_default_format = '%(asctime)s %(name)s %(levelname)s: %(message)s'
_short_format   = '%(levelname)s: %(message)s'

_levels = {
    'debug'   : logging.DEBUG,
    'info'    : logging.INFO,
    'warn'    : logging.WARNING,
    'warning' : logging.WARNING,
    'error'   : logging.ERROR,
    'critical': logging.CRITICAL,
}


# Main class.
# .............................................................................
# Usage is always the same two steps:
#
#     log = Logger().get_log()
#     log.info('something happened')
#
# Calling Logger() without arguments returns the shared 'spiral' log.  Handlers
# are only attached the first time a given name is configured with a file or
# console destination, so library code can call Logger() freely.

class Logger(object):
    def __init__(self, name=None, file=None, console=False):
        self._name = name if name else _default_name
        logger = logging.getLogger(self._name)
        if file and not _has_handler(logger, logging.FileHandler):
            handler = logging.FileHandler(file)
            handler.setFormatter(logging.Formatter(_default_format))
            logger.addHandler(handler)
        if console and not _has_handler(logger, logging.StreamHandler):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(_short_format))
            logger.addHandler(handler)
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        self._log = Log(logger)


    def get_log(self):
        return self._log


class Log(object):
    '''Thin facade over logging.Logger that accepts level names as strings
    and adds fail(), which logs an error and exits.'''

    def __init__(self, logger):
        self._logger = logger


    @property
    def name(self):
        return self._logger.name


    def set_level(self, level):
        if isinstance(level, str):
            if level.lower() not in _levels:
                raise ValueError('Unrecognized logging level: {}'.format(level))
            level = _levels[level.lower()]
        self._logger.setLevel(level)


    def get_level(self):
        return self._logger.getEffectiveLevel()


    def debug(self, *args, **kwargs):
        self._logger.debug(*args, **kwargs)


    def info(self, *args, **kwargs):
        self._logger.info(*args, **kwargs)


    def warn(self, *args, **kwargs):
        self._logger.warning(*args, **kwargs)


    def error(self, *args, **kwargs):
        self._logger.error(*args, **kwargs)


    def fail(self, message, *args, **kwargs):
        self._logger.critical(message, *args, **kwargs)
        raise SystemExit(message)


def _has_handler(logger, handler_class):
    # FileHandler is a subclass of StreamHandler, hence the exact type test.
    return any(type(h) is handler_class for h in logger.handlers)
