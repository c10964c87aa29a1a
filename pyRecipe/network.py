# encoding: utf-8
"""
Construction of a complete network description from a recipe.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from concurrent.futures import ThreadPoolExecutor
import logging

from .errors import CellKindMismatchError
from .simulator import RecipeShim, state

logger = logging.getLogger("PyRecipe")


class CellGroup(object):
    """Everything the engine needs to know about a single cell."""

    def __init__(self, gid, kind, description, num_sources=0, num_targets=0,
                 num_gap_junction_sites=0, event_generators=None, connections=None,
                 gap_junctions=None):
        self.gid = gid
        self.kind = kind
        self.description = description
        self.num_sources = num_sources
        self.num_targets = num_targets
        self.num_gap_junction_sites = num_gap_junction_sites
        self.event_generators = event_generators or []
        self.connections = connections or []
        self.gap_junctions = gap_junctions or []


class Network(object):
    """
    A network built from a recipe: one :class:`CellGroup` per gid, and the
    global properties of each cell kind present in the network.
    """

    def __init__(self, cells, global_properties):
        self.cells = cells
        self.global_properties = global_properties

    def __len__(self):
        return len(self.cells)

    @property
    def num_cells(self):
        return len(self.cells)

    @property
    def descriptions(self):
        return [cell.description for cell in self.cells]

    @property
    def connections(self):
        return [c for cell in self.cells for c in cell.connections]

    @property
    def gap_junctions(self):
        return [gj for cell in self.cells for gj in cell.gap_junctions]

    @property
    def event_generators(self):
        return [g for cell in self.cells for g in cell.event_generators]

    def __str__(self):
        return "<network: %d cells, %d connections, %d gap junctions>" % (
            self.num_cells, len(self.connections), len(self.gap_junctions))

    __repr__ = __str__


def build_cell(shim, gid):
    """Query the recipe for everything about the cell `gid`."""
    kind = shim.get_cell_kind(gid)
    description = shim.get_cell_description(gid)
    if description.kind != kind:
        raise CellKindMismatchError(gid, kind, description.kind)
    return CellGroup(
        gid, kind, description,
        num_sources=shim.num_sources(gid),
        num_targets=shim.num_targets(gid),
        num_gap_junction_sites=shim.num_gap_junction_sites(gid),
        event_generators=shim.event_generators(gid),
        connections=shim.connections_on(gid),
        gap_junctions=shim.gap_junctions_on(gid),
    )


def build_network(recipe, num_threads=None):
    """
    Build a :class:`Network` from `recipe`, querying cells on `num_threads`
    worker threads (default: the value given to `setup()`).

    Any error in the recipe aborts construction and is raised here.
    """
    shim = RecipeShim(recipe)
    num_threads = num_threads or state.num_threads
    n = shim.num_cells()
    logger.info("Building network of %d cells using %d thread(s)", n, num_threads)
    if num_threads > 1:
        with ThreadPoolExecutor(max_workers=num_threads) as executor:
            cells = list(executor.map(lambda gid: build_cell(shim, gid), range(n)))
    else:
        cells = [build_cell(shim, gid) for gid in range(n)]

    global_properties = {}
    for cell in cells:
        if cell.kind not in global_properties:
            global_properties[cell.kind] = shim.get_global_properties(cell.kind)
    network = Network(cells, global_properties)
    logger.debug("Built %s", network)
    return network
