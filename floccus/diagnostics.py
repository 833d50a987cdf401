# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Observers of failed formula validations.

Formulas report every rejected input set to the registered observers
before raising.  The built-in log_error observer writes an ERROR record
and is registered automatically when debug is switched on (see
floccus.config).
"""

import logging
import contextlib

from floccus.config import get_config

logger = logging.getLogger(__name__)

_observers = []


def add_observer(observer):
    """
    Register observer(formula, error, args)
    """
    if observer not in _observers:
        _observers.append(observer)


def remove_observer(observer):
    if observer in _observers:
        _observers.remove(observer)


def get_observers():
    return tuple(_observers)


@contextlib.contextmanager
def observing(observer):
    """
    Register observer for the duration of a with block
    """
    add_observer(observer)
    try:
        yield observer
    finally:
        remove_observer(observer)


def notify(formula, error, args):
    for observer in get_observers():
        try:
            observer(formula, error, args)
        except Exception:
            # The caller still gets the original validation error
            logger.exception("Diagnostics observer %r failed", observer)


def formula_label(formula):
    """
    e.g. vapour_pressure.Buck1
    """
    return "%s.%s" % (formula.__module__.rsplit(".", 1)[-1], formula.__name__)


def log_error(formula, error, args):
    logger.error(
        "Formula %s calculating %s from inputs %s returned error: %s",
        formula_label(formula),
        formula.output.__name__,
        ", ".join(repr(arg) for arg in args),
        error,
    )


def enable():
    add_observer(log_error)


def disable():
    remove_observer(log_error)


def is_enabled():
    return log_error in _observers


if get_config().debug:
    enable()
