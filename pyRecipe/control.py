# encoding: utf-8
"""
Common implementation of functions for set-up and configuration.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

DEFAULT_NUM_THREADS = 1

valid_extra_params = ('rank', 'num_processes')


class BaseState(object):
    """Base class for the global state object."""

    def __init__(self):
        self.num_threads = DEFAULT_NUM_THREADS
        self.mpi_rank = 0
        self.num_processes = 1


def setup(num_threads=DEFAULT_NUM_THREADS, **extra_params):
    """
    Check the arguments to `pyRecipe.setup()`.

    `num_threads` is the number of worker threads used to build a network
    from a recipe. `extra_params` may contain `rank` and `num_processes`.
    """
    invalid_extra_params = ('threads', 'nthreads', 'n_threads')
    for param in invalid_extra_params:
        if param in extra_params:
            raise Exception("%s is not a valid argument for setup(), did you mean num_threads?" % param)
    for param in extra_params:
        if param not in valid_extra_params:
            raise Exception("%s is not a valid argument for setup()" % param)
    if not isinstance(num_threads, int) or num_threads < 1:
        raise ValueError("num_threads must be a positive integer (got %r)" % (num_threads,))
