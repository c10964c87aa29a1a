"""
A collection of utility functions.

Functions:
    init_logging() - convenience function for setting up logging to file and
                     to the screen.
    is_listlike()
    is_sequencelike()

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging
import os

import numpy as np


def is_listlike(obj):
    """
    Check whether an object (a) can be converted into an array/list *and* has a
    length. This excludes iterators, for example.
    """
    return (
        isinstance(obj, (list, tuple, set))
        or (isinstance(obj, np.ndarray) and obj.ndim > 0)
    )


def is_sequencelike(obj):
    """
    As is_listlike(), but excludes sets, whose iteration order is arbitrary.
    """
    return is_listlike(obj) and not isinstance(obj, (set, frozenset))


def init_logging(logfile, debug=False, num_processes=1, rank=0, level=None):
    """
    Simple configuration of logging.

    If `logfile` is None, log messages go to stderr.
    """
    if logfile:
        if num_processes > 1:
            logfile += '.%d' % rank
        logfile = os.path.abspath(logfile)

    # prefix log messages with mpi rank
    mpi_prefix = ""
    if num_processes > 1:
        mpi_prefix = 'Rank %d of %d: ' % (rank, num_processes)

    if debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    # allow user to override exact log_level
    if level:
        log_level = level

    logging.basicConfig(
        level=log_level,
        format=mpi_prefix + '%(asctime)s %(levelname)-8s [%(name)s] %(message)s (%(pathname)s[%(lineno)d]:%(funcName)s)',  # noqa: E501
        filename=logfile,
        filemode='w')
    return logging.getLogger("PyRecipe")
