# encoding: utf-8
"""
Time schedules, used by event generators and spike source cells to produce
sequences of event times.

Classes:
    Schedule         - abstract base class
    RegularSchedule  - events at regular intervals
    ExplicitSchedule - events at a user-supplied list of times
    PoissonSchedule  - events drawn from a Poisson process

All times are in milliseconds. Every schedule implements `events(t0, t1)`,
returning a sorted NumPy array of the event times in the half-open interval
[t0, t1), and `reset()`.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

import numpy as np
import neo
import quantities as pq


class Schedule(object):
    """Base class for time schedules."""
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

    def events(self, t0, t1):
        raise NotImplementedError

    def reset(self):
        pass


def _upper_bound(t1, tstop):
    if tstop is not None:
        t1 = min(t1, tstop)
    if not np.isfinite(t1):
        raise ValueError("events requested up to %s from a schedule without tstop" % t1)
    return t1


class RegularSchedule(Schedule):
    """
    Events at regular intervals `dt`, starting at `tstart` and stopping before
    `tstop` (default: never stops).
    """
    parameter_names = ("tstart", "dt", "tstop")

    def __init__(self, tstart=0.0, dt=1.0, tstop=None):
        if not dt > 0:
            raise ValueError("dt must be positive (got %s)" % dt)
        if tstart < 0:
            raise ValueError("tstart must be non-negative (got %s)" % tstart)
        self.tstart = float(tstart)
        self.dt = float(dt)
        self.tstop = None if tstop is None else float(tstop)

    def events(self, t0, t1):
        t1 = _upper_bound(t1, self.tstop)
        t0 = max(t0, self.tstart)
        if t1 <= t0:
            return np.array([], dtype=float)
        first = np.ceil((t0 - self.tstart) / self.dt)
        last = np.ceil((t1 - self.tstart) / self.dt)
        return self.tstart + self.dt * np.arange(first, last)

    def __str__(self):
        return "<regular schedule: tstart %g ms, dt %g ms, tstop %s>" % (
            self.tstart, self.dt, "None" if self.tstop is None else "%g ms" % self.tstop)

    __repr__ = __str__


class ExplicitSchedule(Schedule):
    """
    Events at an explicit list of times. `times` may be anything that can be
    converted to a NumPy array (values in ms), a `quantities.Quantity` array or
    a `neo.SpikeTrain`, which are rescaled to ms.
    """

    def __init__(self, times=()):
        if isinstance(times, (neo.SpikeTrain, pq.Quantity)):
            times = times.rescale(pq.ms).magnitude
        times = np.sort(np.asarray(times, dtype=float).ravel())
        if times.size and times[0] < 0:
            raise ValueError("event times must be non-negative (got %s)" % times[0])
        self.times = times

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return np.array_equal(self.times, other.times)

    def events(self, t0, t1):
        lo, hi = np.searchsorted(self.times, [t0, t1], side="left")
        return self.times[lo:hi].copy()

    def __str__(self):
        return "<explicit schedule: %d events>" % self.times.size

    __repr__ = __str__


class PoissonSchedule(Schedule):
    """
    Events drawn from a Poisson process with rate `freq` (unit: kHz), starting
    at `tstart` and stopping before `tstop` (default: never stops). The event
    stream is reproducible for a given `seed`.
    """
    parameter_names = ("tstart", "freq", "seed", "tstop")

    def __init__(self, tstart=0.0, freq=1.0, seed=0, tstop=None):
        if freq < 0:
            raise ValueError("freq must be non-negative (got %s)" % freq)
        self.tstart = float(tstart)
        self.freq = float(freq)
        self.seed = seed
        self.tstop = None if tstop is None else float(tstop)
        self.reset()

    def reset(self):
        self._rng = np.random.default_rng(self.seed)
        self._next = self.tstart + self._interval()

    def _interval(self):
        if self.freq == 0:
            return np.inf
        return self._rng.exponential(1.0 / self.freq)

    def events(self, t0, t1):
        t1 = _upper_bound(t1, self.tstop)
        times = []
        while self._next < t0:
            self._next += self._interval()
        while self._next < t1:
            times.append(self._next)
            self._next += self._interval()
        return np.array(times, dtype=float)

    def __str__(self):
        return "<poisson schedule: tstart %g ms, freq %g kHz, seed %s>" % (
            self.tstart, self.freq, self.seed)

    __repr__ = __str__
