# encoding: utf-8
"""
PyRecipe: marshalling of cell-centric model descriptions ("recipes") into
validated, engine-native objects.

A model author subclasses :class:`Recipe`; the network is then assembled with
:func:`build_network`::

    >>> import pyRecipe as rcp
    >>> class SingleCell(rcp.Recipe):
    ...     def num_cells(self):
    ...         return 1
    ...     def cell_kind(self, gid):
    ...         return rcp.CellKind.lif
    ...     def cell_description(self, gid):
    ...         return rcp.LIFCell()
    >>> rcp.build_network(SingleCell())
    <network: 1 cells, 0 connections, 0 gap junctions>

Modules:
    cells
    connections
    control
    errors
    event_generators
    network
    recipe
    resolvers
    schedules
    simulator
    utility

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

__version__ = '0.1.0'

import logging

from pyRecipe import control
from pyRecipe.control import DEFAULT_NUM_THREADS
from pyRecipe.cells import (CellKind, CellDescription, CableCell, LIFCell,  # noqa: F401
                            SpikeSourceCell, BenchmarkCell, CableGlobalProperties,
                            neuron_cable_properties)
from pyRecipe.connections import (CellMember, CellConnection, Connection,  # noqa: F401
                                  GapJunctionConnection)
from pyRecipe.errors import (RecipeError, DescriptionMismatchError,  # noqa: F401
                             PropertiesMismatchError, GeneratorValidationError,
                             ConstraintViolationError, InvalidConnectionError,
                             CellKindMismatchError, InvalidQueryResultError)
from pyRecipe.event_generators import (EventGenerator, ScheduleGenerator,  # noqa: F401
                                       SpikeEvent, convert_event_generators)
from pyRecipe.network import Network, build_network  # noqa: F401
from pyRecipe.recipe import Recipe  # noqa: F401
from pyRecipe.resolvers import resolve_cell_description, resolve_global_properties  # noqa: F401
from pyRecipe.schedules import (Schedule, RegularSchedule, ExplicitSchedule,  # noqa: F401
                                PoissonSchedule)
from pyRecipe.simulator import RecipeShim, host_runtime, state  # noqa: F401
from pyRecipe.utility import init_logging  # noqa: F401

logger = logging.getLogger("PyRecipe")


def setup(num_threads=DEFAULT_NUM_THREADS, **extra_params):
    """
    Should be called before building networks. Any existing configuration is
    discarded.

    `num_threads` is the number of worker threads used by `build_network()`.
    `extra_params` may contain `rank` and `num_processes`, used for logging.

    returns: MPI rank
    """
    control.setup(num_threads, **extra_params)
    state.clear()
    state.num_threads = num_threads
    state.mpi_rank = extra_params.get('rank', 0)
    state.num_processes = extra_params.get('num_processes', 1)
    logger.debug("setup(num_threads=%d) on rank %d of %d",
                 num_threads, state.mpi_rank, state.num_processes)
    return state.mpi_rank


def end():
    """Restore the default configuration."""
    state.clear()


def rank():
    """Return the MPI rank of the current node."""
    return state.mpi_rank


def num_processes():
    """Return the number of MPI processes."""
    return state.num_processes
