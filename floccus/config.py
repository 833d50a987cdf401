# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Package settings.

Each setting is looked up in turn from
    1. an environment variable (FLOCCUS_DEBUG, FLOCCUS_WORKERS)
    2. the config file, i.e. ~/.config/floccus.conf via $XDG_CONFIG_HOME
    3. the built-in default

Example floccus.conf:

    [Diagnostics]
    debug = yes

    [Parallel]
    workers = 4
"""

import os
import collections
import configparser

Config = collections.namedtuple("Config", ["debug", "workers"])

DEFAULTS = Config(debug=False, workers=None)

_config = None


def get_config_file():
    """
    Default config file location, or None if XDG_CONFIG_HOME is unset
    """
    if "XDG_CONFIG_HOME" in os.environ:
        return os.path.join(os.environ["XDG_CONFIG_HOME"], "floccus.conf")
    return None


def parse_bool(text):
    try:
        return configparser.ConfigParser.BOOLEAN_STATES[text.strip().lower()]
    except KeyError:
        raise ValueError("Not a boolean: %r" % text)


def parse_workers(text):
    workers = int(text)
    if workers < 1:
        raise ValueError("Number of workers must be positive, got %d" % workers)
    return workers


def load_config(config_file=None):
    """
    Resolve settings from environment, config file and defaults.
    """
    debug, workers = DEFAULTS

    if config_file is None:
        config_file = get_config_file()

    if config_file is not None:
        # Missing files are silently skipped by configparser
        config = configparser.ConfigParser()
        config.read(config_file)
        debug = config.getboolean("Diagnostics", "debug", fallback=debug)
        text = config.get("Parallel", "workers", fallback=None)
        if text is not None:
            workers = parse_workers(text)

    if "FLOCCUS_DEBUG" in os.environ:
        debug = parse_bool(os.environ["FLOCCUS_DEBUG"])

    if "FLOCCUS_WORKERS" in os.environ:
        workers = parse_workers(os.environ["FLOCCUS_WORKERS"])

    return Config(debug=debug, workers=workers)


def get_config(reload=False):
    """
    Process-wide settings, resolved once.
    """
    global _config
    if _config is None or reload:
        _config = load_config()
    return _config


def set_workers(workers=None):
    """
    Override the worker count used by parallel bulk computations.
    None restores the executor default.
    """
    global _config
    if workers is not None:
        workers = parse_workers(workers)
    _config = get_config()._replace(workers=workers)
    return _config
