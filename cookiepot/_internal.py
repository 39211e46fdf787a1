# -*- coding: utf-8 -*-
"""
    cookiepot._internal
    ~~~~~~~~~~~~~~~~~~~

    This module provides internally used helpers.
"""
import logging

_logger = None


def _log(type, message, *args, **kwargs):
    """Log into the internal cookiepot logger."""
    global _logger
    if _logger is None:
        _logger = logging.getLogger('cookiepot')
        # Only set up a default log handler if the
        # end-user application didn't set anything up.
        if not logging.root.handlers and _logger.level == logging.NOTSET:
            _logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            _logger.addHandler(handler)
    getattr(_logger, type)(message.rstrip(), *args, **kwargs)
