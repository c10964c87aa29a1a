"""
Tests of the set-up and configuration functions.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import logging
import os
import tempfile
import unittest

import pyRecipe as sim
from pyRecipe.utility import init_logging, is_listlike, is_sequencelike
import numpy


class TestSimulationControl(unittest.TestCase):

    def tearDown(self):
        sim.end()

    def test_setup(self):
        self.assertRaises(Exception, sim.setup, threads=4)          # }
        self.assertRaises(Exception, sim.setup, nthreads=4)         # } misspellings
        self.assertRaises(Exception, sim.setup, timestep=0.1)
        self.assertRaises(ValueError, sim.setup, num_threads=0)
        self.assertRaises(ValueError, sim.setup, num_threads=2.5)

    def test_setup_returns_rank(self):
        self.assertEqual(sim.setup(rank=2, num_processes=4), 2)
        self.assertEqual(sim.rank(), 2)
        self.assertEqual(sim.num_processes(), 4)

    def test_num_threads(self):
        sim.setup(num_threads=3)
        self.assertEqual(sim.state.num_threads, 3)

    def test_end(self):
        sim.setup(num_threads=3, rank=1, num_processes=2)
        sim.end()
        self.assertEqual(sim.state.num_threads, sim.DEFAULT_NUM_THREADS)
        self.assertEqual(sim.rank(), 0)


def test_is_list_like_with_tuple():
    assert is_listlike((1, 2, 3))


def test_is_list_like_with_iterator():
    assert not is_listlike(iter((1, 2, 3)))


def test_is_list_like_with_numpy_array():
    assert is_listlike(numpy.arange(10))


def test_is_list_like_with_string():
    assert not is_listlike("abcdefg")


def test_is_sequence_like_excludes_sets():
    assert is_listlike({1, 2})
    assert not is_sequencelike({1, 2})
    assert not is_sequencelike(frozenset([1, 2]))
    assert is_sequencelike([2, 1])
    assert is_sequencelike(numpy.arange(3))


def test_init_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    for h in handlers:
        root.removeHandler(h)
    try:
        with tempfile.TemporaryDirectory() as tmpdir:
            logfile = os.path.join(tmpdir, "recipe.log")
            logger = init_logging(logfile, debug=True, num_processes=2, rank=1)
            assert logger.name == "PyRecipe"
            logger.debug("hello")
            for h in root.handlers:
                h.flush()
            with open(logfile + ".1") as f:
                content = f.read()
            assert "Rank 1 of 2: " in content
            assert "hello" in content
            for h in list(root.handlers):
                h.close()
                root.removeHandler(h)
    finally:
        for h in handlers:
            root.addHandler(h)
