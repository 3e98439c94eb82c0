# -*- coding: utf-8 -*-
"""
Initialise the memocache module.

This file exposes the public API and some variables we need in the
``memocache`` name space.
"""

import os
from memocache.version import __version__, __app_name__
from memocache.core.memoize import Memoize, memoize
from memocache.core.adapters import mem_fn
from memocache.core.exceptions import SignatureMismatchError
from memocache.core.exceptions import UnhashableArgumentError

#: The demonstration scenarios the CLI runs when none are selected.
DEFAULT_SCENARIOS = ['functor', 'overloaded', 'member']

#: Directory where logs will be saved when ``--logdir`` is given without a
#: value.
LOG_DIR = "/var/log/memocache/"

#: Default locations to look for config files in order of importance.
DEFAULT_CONFIG_FILE_LOCATIONS = [
    os.path.join(os.path.realpath(''), 'memocache.conf'),
    '~/.memocache.conf',
    '/etc/memocache/memocache.conf'
]

__all__ = [
    'Memoize',
    'memoize',
    'mem_fn',
    'SignatureMismatchError',
    'UnhashableArgumentError',
    '__version__',
    '__app_name__',
]
