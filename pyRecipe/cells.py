# encoding: utf-8
"""
Cell kinds and the cell descriptions understood by the simulation engine.

The internal structure of the descriptions is not interpreted by PyRecipe;
they are carried from the recipe to the engine unchanged.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from enum import Enum

from .schedules import Schedule


class CellKind(Enum):
    """The kinds of cell supported by the engine."""
    cable = "cable"
    lif = "lif"
    spike_source = "spike_source"
    benchmark = "benchmark"

    def __str__(self):
        return "cell_kind.%s" % self.name


class _Description(object):
    """Base class giving value semantics to cell and property descriptions."""
    parameter_names = ()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name)
                   for name in self.parameter_names)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        args = ", ".join("%s=%r" % (name, getattr(self, name)) for name in self.parameter_names)
        return "<%s: %s>" % (self.__class__.__name__, args)


class CableCell(_Description):
    """
    A multi-compartment cell, described by its morphology, a dictionary of
    region/locset labels and a decor (the placement of ion channels, synapses
    and detectors).
    """
    parameter_names = ("morphology", "labels", "decor")

    def __init__(self, morphology, labels=None, decor=None):
        self.morphology = morphology
        self.labels = dict(labels or {})
        self.decor = decor


class LIFCell(_Description):
    """
    A leaky integrate-and-fire cell.

    Parameters (with units):
        tau_m   - membrane potential decaying constant [ms]
        V_th    - firing threshold [mV]
        C_m     - membrane capacitance [pF]
        E_L     - resting potential [mV]
        V_m     - initial membrane potential [mV]
        V_reset - reset potential [mV]
        t_ref   - refractory period [ms]
    """
    parameter_names = ("tau_m", "V_th", "C_m", "E_L", "V_m", "V_reset", "t_ref")

    def __init__(self, tau_m=10.0, V_th=10.0, C_m=20.0, E_L=0.0, V_m=0.0,
                 V_reset=0.0, t_ref=2.0):
        self.tau_m = tau_m
        self.V_th = V_th
        self.C_m = C_m
        self.E_L = E_L
        self.V_m = V_m
        self.V_reset = V_reset
        self.t_ref = t_ref


class SpikeSourceCell(_Description):
    """A cell that emits spikes at the times given by a schedule."""
    parameter_names = ("schedule",)

    def __init__(self, schedule):
        if not isinstance(schedule, Schedule):
            raise TypeError("schedule must be a Schedule, not %s" % type(schedule).__name__)
        self.schedule = schedule


class BenchmarkCell(_Description):
    """
    A cell used for benchmarking: it spikes according to a schedule and takes
    `realtime_ratio` times the simulated time to advance.
    """
    parameter_names = ("schedule", "realtime_ratio")

    def __init__(self, schedule, realtime_ratio=1.0):
        if not isinstance(schedule, Schedule):
            raise TypeError("schedule must be a Schedule, not %s" % type(schedule).__name__)
        if realtime_ratio < 0:
            raise ValueError("realtime_ratio must be non-negative (got %s)" % realtime_ratio)
        self.schedule = schedule
        self.realtime_ratio = realtime_ratio


class CableGlobalProperties(_Description):
    """
    Global properties of cable cells: default membrane voltage (mV),
    membrane capacitance (F/m²), axial resistivity (Ω·cm), temperature (K),
    per-ion concentrations (mM) and reversal potentials (mV), and the name of
    the mechanism catalogue.
    """
    parameter_names = ("Vm", "cm", "rL", "tempK", "ions", "catalogue")

    def __init__(self, Vm=None, cm=None, rL=None, tempK=None, ions=None, catalogue=None):
        self.Vm = Vm
        self.cm = cm
        self.rL = rL
        self.tempK = tempK
        self.ions = dict(ions or {})
        self.catalogue = catalogue

    def set_ion(self, ion, int_con=None, ext_con=None, rev_pot=None):
        """Set the default concentrations and reversal potential of `ion`."""
        self.ions[ion] = {"int_con": int_con, "ext_con": ext_con, "rev_pot": rev_pot}


def neuron_cable_properties():
    """Global properties for cable cells with the NEURON defaults."""
    props = CableGlobalProperties(Vm=-65.0, cm=0.01, rL=35.4, tempK=6.3 + 273.15,
                                  catalogue="default")
    props.set_ion("na", int_con=10.0, ext_con=140.0, rev_pot=50.0)
    props.set_ion("k", int_con=54.4, ext_con=2.5, rev_pot=-77.0)
    props.set_ion("ca", int_con=5e-5, ext_con=2.0, rev_pot=132.457934)
    return props


class CellDescription(object):
    """
    A resolved cell description: exactly one payload, tagged with its kind.
    """
    __slots__ = ("kind", "payload")

    def __init__(self, kind, payload):
        self.kind = CellKind(kind)
        self.payload = payload

    def __eq__(self, other):
        if not isinstance(other, CellDescription):
            return NotImplemented
        return self.kind == other.kind and self.payload == other.payload

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "<CellDescription %s: %r>" % (self.kind.name, self.payload)
