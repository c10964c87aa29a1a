"""
Tests of the `Recipe` base class and of `RecipeShim`.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import threading
import unittest
from unittest.mock import Mock

import pyRecipe as rcp
from pyRecipe.simulator import state


def lock_is_free():
    """Check from another thread whether the host lock can be taken."""
    result = []

    def try_acquire():
        acquired = state.host_lock.acquire(blocking=False)
        if acquired:
            state.host_lock.release()
        result.append(acquired)

    t = threading.Thread(target=try_acquire)
    t.start()
    t.join()
    return result[0]


class MinimalRecipe(rcp.Recipe):

    def num_cells(self):
        return 1

    def cell_kind(self, gid):
        return rcp.CellKind.lif

    def cell_description(self, gid):
        return rcp.LIFCell()


class LockCheckingRecipe(MinimalRecipe):
    """Records whether the host lock was held during each call."""

    def __init__(self):
        self.lock_held = {}

    def _record(self, name):
        self.lock_held[name] = not lock_is_free()

    def cell_description(self, gid):
        self._record("cell_description")
        return rcp.LIFCell()

    def global_properties(self, kind):
        self._record("global_properties")
        return None

    def event_generators(self, gid):
        self._record("event_generators")
        return []

    def connections_on(self, gid):
        self._record("connections_on")
        return []

    def gap_junctions_on(self, gid):
        self._record("gap_junctions_on")
        return []

    def num_sources(self, gid):
        self._record("num_sources")
        return 0

    def num_targets(self, gid):
        self._record("num_targets")
        return 0

    def num_gap_junction_sites(self, gid):
        self._record("num_gap_junction_sites")
        return 0


class RecipeTest(unittest.TestCase):

    def test_defaults(self):
        r = MinimalRecipe()
        self.assertEqual(r.num_sources(0), 0)
        self.assertEqual(r.num_targets(0), 0)
        self.assertEqual(r.num_gap_junction_sites(0), 0)
        self.assertEqual(r.event_generators(0), [])
        self.assertEqual(r.connections_on(0), [])
        self.assertEqual(r.gap_junctions_on(0), [])
        self.assertIsNone(r.global_properties(rcp.CellKind.lif))

    def test_required_methods(self):
        r = rcp.Recipe()
        self.assertRaises(NotImplementedError, r.num_cells)
        self.assertRaises(NotImplementedError, r.cell_kind, 0)
        self.assertRaises(NotImplementedError, r.cell_description, 0)

    def test_str(self):
        self.assertEqual(str(rcp.Recipe()), "<pyRecipe.recipe>")
        self.assertEqual(repr(rcp.Recipe()), "<pyRecipe.recipe>")


class RecipeShimTest(unittest.TestCase):

    def test_defaults_are_valid(self):
        shim = rcp.RecipeShim(MinimalRecipe())
        self.assertEqual(shim.num_cells(), 1)
        self.assertEqual(shim.get_cell_kind(0), rcp.CellKind.lif)
        self.assertEqual(shim.num_sources(0), 0)
        self.assertEqual(shim.num_targets(0), 0)
        self.assertEqual(shim.num_gap_junction_sites(0), 0)
        self.assertEqual(shim.event_generators(0), [])
        self.assertEqual(shim.connections_on(0), [])
        self.assertEqual(shim.gap_junctions_on(0), [])
        self.assertIsNone(shim.get_global_properties(rcp.CellKind.lif))

    def test_cable_without_global_properties(self):
        shim = rcp.RecipeShim(MinimalRecipe())
        self.assertRaises(rcp.PropertiesMismatchError, shim.get_global_properties,
                          rcp.CellKind.cable)

    def test_lock_held_during_host_calls(self):
        recipe = LockCheckingRecipe()
        shim = rcp.RecipeShim(recipe)
        shim.get_cell_description(0)
        shim.get_global_properties(rcp.CellKind.lif)
        shim.event_generators(0)
        shim.connections_on(0)
        shim.gap_junctions_on(0)
        shim.num_sources(0)
        shim.num_targets(0)
        shim.num_gap_junction_sites(0)
        self.assertEqual(len(recipe.lock_held), 8)
        self.assertTrue(all(recipe.lock_held.values()), recipe.lock_held)
        self.assertTrue(lock_is_free())

    def test_lock_released_on_error(self):
        recipe = Mock()
        recipe.cell_description.return_value = "garbage"
        recipe.event_generators.side_effect = RuntimeError("bug in recipe")
        shim = rcp.RecipeShim(recipe)
        self.assertRaises(rcp.DescriptionMismatchError, shim.get_cell_description, 3)
        self.assertTrue(lock_is_free())
        self.assertRaises(RuntimeError, shim.event_generators, 3)
        self.assertTrue(lock_is_free())

    def test_cell_kind_by_value(self):
        recipe = Mock()
        recipe.cell_kind.return_value = "spike_source"
        self.assertEqual(rcp.RecipeShim(recipe).get_cell_kind(0), rcp.CellKind.spike_source)

    def test_invalid_cell_kind(self):
        recipe = Mock()
        recipe.cell_kind.return_value = "hodgkin-huxley"
        shim = rcp.RecipeShim(recipe)
        self.assertRaises(ValueError, shim.get_cell_kind, 0)
        try:
            shim.get_cell_kind(7)
        except rcp.InvalidQueryResultError as err:
            self.assertIsInstance(err, rcp.RecipeError)
            self.assertEqual(err.query, "cell_kind")
            self.assertEqual(err.gid, 7)
            self.assertIn("hodgkin-huxley", str(err))
        else:
            self.fail("InvalidQueryResultError not raised")

    def test_invalid_counts(self):
        recipe = Mock()
        recipe.num_cells.return_value = -3
        recipe.num_sources.return_value = -1
        recipe.num_targets.return_value = 1.5
        recipe.num_gap_junction_sites.return_value = "2"
        shim = rcp.RecipeShim(recipe)
        for query in (shim.num_sources, shim.num_targets, shim.num_gap_junction_sites):
            self.assertRaises(ValueError, query, 0)
            self.assertRaises(rcp.RecipeError, query, 0)
        try:
            shim.num_cells()
        except rcp.InvalidQueryResultError as err:
            self.assertIsNone(err.gid)
            self.assertEqual(str(err),
                             "recipe.num_cells returned -3, expected a non-negative integer")
        else:
            self.fail("InvalidQueryResultError not raised")

    def test_invalid_count_rendered_under_lock(self):

        class Count(object):
            lock_held = None

            def __repr__(self):
                Count.lock_held = not lock_is_free()
                return "<count>"

        recipe = Mock()
        recipe.num_sources.return_value = Count()
        self.assertRaises(rcp.InvalidQueryResultError, rcp.RecipeShim(recipe).num_sources, 0)
        self.assertTrue(Count.lock_held)
        self.assertTrue(lock_is_free())

    def test_connections_are_converted(self):
        recipe = Mock()
        recipe.connections_on.return_value = [rcp.Connection((0, 0), (1, 0), 0.05, 0.1)]
        connections = rcp.RecipeShim(recipe).connections_on(1)
        self.assertEqual(connections,
                         [rcp.CellConnection(rcp.CellMember(0, 0), rcp.CellMember(1, 0), 0.05, 0.1)])

    def test_foreign_connection(self):
        recipe = Mock()
        recipe.connections_on.return_value = [((0, 0), (1, 0), 0.05, 0.1)]
        self.assertRaises(rcp.InvalidConnectionError, rcp.RecipeShim(recipe).connections_on, 1)

    def test_connection_set(self):
        recipe = Mock()
        recipe.connections_on.return_value = {"a", "b"}
        recipe.gap_junctions_on.return_value = frozenset()
        shim = rcp.RecipeShim(recipe)
        self.assertRaises(rcp.InvalidConnectionError, shim.connections_on, 1)
        self.assertRaises(rcp.InvalidConnectionError, shim.gap_junctions_on, 1)

    def test_gap_junctions_are_copied(self):
        gj = rcp.GapJunctionConnection((0, 0), (1, 0), 0.2)
        recipe = Mock()
        recipe.gap_junctions_on.return_value = [gj]
        result, = rcp.RecipeShim(recipe).gap_junctions_on(0)
        self.assertEqual(result, gj)
        gj.ggap = 5.0
        self.assertEqual(result.ggap, 0.2)

    def test_foreign_gap_junction(self):
        recipe = Mock()
        recipe.gap_junctions_on.return_value = [rcp.Connection((0, 0), (1, 0), 0.05, 0.1)]
        self.assertRaises(rcp.InvalidConnectionError, rcp.RecipeShim(recipe).gap_junctions_on, 0)


if __name__ == '__main__':
    unittest.main()
