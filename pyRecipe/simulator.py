"""
Global state and the engine-side view of a recipe.

Recipes are implemented in Python and are not safe to call from several
threads at once. Every call from the engine into a recipe is made through a
:class:`RecipeShim`, which holds the process-wide host lock for the duration
of that call only, and converts the result into engine-native objects.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from contextlib import contextmanager
import logging
import numbers
import threading

from .cells import CellKind
from .connections import Connection, GapJunctionConnection
from .control import BaseState, DEFAULT_NUM_THREADS
from .errors import InvalidConnectionError, InvalidQueryResultError
from .event_generators import convert_event_generators
from .resolvers import resolve_cell_description, resolve_global_properties
from .utility import is_sequencelike

logger = logging.getLogger("PyRecipe")


class State(BaseState):

    def __init__(self):
        BaseState.__init__(self)
        # re-entrant, so a recipe may itself go through a shim
        self.host_lock = threading.RLock()
        self.clear()

    def clear(self):
        self.num_threads = DEFAULT_NUM_THREADS
        self.mpi_rank = 0
        self.num_processes = 1


state = State()


@contextmanager
def host_runtime():
    """Hold the host lock for the duration of the `with` block."""
    with state.host_lock:
        yield


def _count(query, gid, value):
    if not isinstance(value, numbers.Integral) or isinstance(value, bool) or value < 0:
        raise InvalidQueryResultError(query, gid, value, "a non-negative integer")
    return int(value)


def _as_list(gid, value, what):
    if value is None:
        return []
    if not is_sequencelike(value):
        raise InvalidConnectionError(gid, value, what)
    return list(value)


class RecipeShim(object):
    """
    Wraps a :class:`~pyRecipe.recipe.Recipe` so that the engine can query it
    from any thread, and receive validated, engine-native objects.
    """

    def __init__(self, recipe):
        self.recipe = recipe

    def num_cells(self):
        with host_runtime():
            n = _count("num_cells", None, self.recipe.num_cells())
        logger.debug("Recipe %s has %d cells", type(self.recipe).__name__, n)
        return n

    def get_cell_kind(self, gid):
        with host_runtime():
            kind = self.recipe.cell_kind(gid)
            try:
                return CellKind(kind)
            except ValueError:
                raise InvalidQueryResultError("cell_kind", gid, kind, "a cell kind")

    def get_cell_description(self, gid):
        with host_runtime():
            obj = self.recipe.cell_description(gid)
            # copied while still holding the lock
            return resolve_cell_description(gid, obj)

    def get_global_properties(self, kind):
        with host_runtime():
            obj = self.recipe.global_properties(kind)
            return resolve_global_properties(kind, obj)

    def num_sources(self, gid):
        with host_runtime():
            return _count("num_sources", gid, self.recipe.num_sources(gid))

    def num_targets(self, gid):
        with host_runtime():
            return _count("num_targets", gid, self.recipe.num_targets(gid))

    def num_gap_junction_sites(self, gid):
        with host_runtime():
            return _count("num_gap_junction_sites", gid, self.recipe.num_gap_junction_sites(gid))

    def event_generators(self, gid):
        with host_runtime():
            generators = self.recipe.event_generators(gid)
            return convert_event_generators(gid, generators)

    def connections_on(self, gid):
        with host_runtime():
            connections = self.recipe.connections_on(gid)
            connections = _as_list(gid, connections, "list of connections")
            for c in connections:
                if not isinstance(c, Connection):
                    raise InvalidConnectionError(gid, c, "connection")
            return [c.to_cell_connection() for c in connections]

    def gap_junctions_on(self, gid):
        with host_runtime():
            gap_junctions = self.recipe.gap_junctions_on(gid)
            gap_junctions = _as_list(gid, gap_junctions, "list of gap junctions")
            for gj in gap_junctions:
                if not isinstance(gj, GapJunctionConnection):
                    raise InvalidConnectionError(gid, gj, "gap junction")
            return [GapJunctionConnection(gj.local, gj.peer, gj.ggap) for gj in gap_junctions]

    def __str__(self):
        return "<recipe shim: %s>" % self.recipe

    __repr__ = __str__
