# encoding: utf-8
"""
The recipe: a cell-centric description of a model, which model authors
implement by subclassing :class:`Recipe`.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""


class Recipe(object):
    """
    A description of a model, describing the cells and the network via a
    cell-centric interface.

    Subclasses must implement `num_cells()`, `cell_kind()` and
    `cell_description()`. All other methods have defaults, which describe
    cells without sources, targets, gap junction sites, event generators or
    connections. `global_properties()` must be implemented if the model
    contains cable cells.
    """

    def num_cells(self):
        """The number of cells in the model."""
        raise NotImplementedError

    def cell_kind(self, gid):
        """The kind of cell with global identifier gid (a `CellKind`)."""
        raise NotImplementedError

    def cell_description(self, gid):
        """High level description of the cell with global identifier gid."""
        raise NotImplementedError

    def num_sources(self, gid):
        """The number of spike sources on gid (default 0)."""
        return 0

    def num_targets(self, gid):
        """The number of post-synaptic sites on gid (default 0)."""
        return 0

    def num_gap_junction_sites(self, gid):
        """The number of gap junction sites on gid (default 0)."""
        return 0

    def event_generators(self, gid):
        """A list of all the event generators that are attached to gid (default [])."""
        return []

    def connections_on(self, gid):
        """A list of all the incoming connections to gid (default [])."""
        return []

    def gap_junctions_on(self, gid):
        """A list of the gap junctions connected to gid (default [])."""
        return []

    def global_properties(self, kind):
        """
        Global property type specific to a given cell kind.

        This method needs to be implemented for `CellKind.cable`, returning a
        `CableGlobalProperties`. By default returns None.
        """
        return None

    def __str__(self):
        return "<pyRecipe.recipe>"

    __repr__ = __str__
