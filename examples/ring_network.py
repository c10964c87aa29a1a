# encoding: utf8
"""
A ring of cable cells, each cell connected to the next one, with a spike
source driving the first cell of the ring.

The recipe is turned into a network description, which is then summarized.

Usage: python ring_network.py [-h] [--ncells NCELLS] [--threads THREADS] [--debug]

optional arguments:
  -h, --help         show this help message and exit
  --ncells NCELLS    Number of cable cells in the ring (default 10)
  --threads THREADS  Number of threads used to build the network (default 1)
  --debug            Print debugging information

"""

import argparse

import pyRecipe as rcp
from pyRecipe.utility import init_logging


# === Parameters ============================================================

weight = 0.01      # μS on expsyn
delay = 5.0        # ms
stimulus_weight = 0.1


# === The recipe ============================================================

class RingRecipe(rcp.Recipe):

    def __init__(self, ncells):
        self.ncells = ncells
        self.props = rcp.neuron_cable_properties()

    # The last gid is a spike source, all the others are in the ring.
    def num_cells(self):
        return self.ncells + 1

    def cell_kind(self, gid):
        if gid == self.ncells:
            return rcp.CellKind.spike_source
        return rcp.CellKind.cable

    def cell_description(self, gid):
        if gid == self.ncells:
            return rcp.SpikeSourceCell(rcp.RegularSchedule(tstart=0.0, dt=50.0))
        return rcp.CableCell("soma.swc", {"soma": "(tag 1)", "synapse_site": "(location 0 0.5)"},
                             decor=[("paint", '"soma"', "hh"), ("place", '"synapse_site"', "expsyn")])

    def num_sources(self, gid):
        return 1

    def num_targets(self, gid):
        return 0 if gid == self.ncells else 1

    def connections_on(self, gid):
        if gid == self.ncells:
            return []
        src = (gid - 1) % self.ncells
        connections = [rcp.Connection((src, 0), (gid, 0), weight, delay)]
        if gid == 0:
            connections.append(rcp.Connection((self.ncells, 0), (gid, 0), weight, delay))
        return connections

    def event_generators(self, gid):
        if gid == 0:
            sched = rcp.ExplicitSchedule([1.0])  # one event at 1 ms
            return [rcp.EventGenerator((gid, 0), stimulus_weight, sched)]
        return []

    def global_properties(self, kind):
        if kind == rcp.CellKind.cable:
            return self.props
        return None


# === Build the network =====================================================

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--ncells", type=int, default=10,
                        help="Number of cable cells in the ring (default 10)")
    parser.add_argument("--threads", type=int, default=1,
                        help="Number of threads used to build the network (default 1)")
    parser.add_argument("--debug", action="store_true", help="Print debugging information")
    options = parser.parse_args()

    if options.debug:
        init_logging(None, debug=True)

    rcp.setup(num_threads=options.threads)
    network = rcp.build_network(RingRecipe(options.ncells))

    print(network)
    for connection in network.connections[:3]:
        print("  %s -> %s" % (connection.source, connection.destination))
    for generator in network.event_generators:
        print("  %s: %s" % (generator, generator.events(0.0, 10.0)))
    rcp.end()
