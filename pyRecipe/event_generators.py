# encoding: utf-8
"""
Event generators: sources of timed events injected into the network.

A recipe returns `EventGenerator` objects from `recipe.event_generators(gid)`.
The engine works with `ScheduleGenerator` objects, which are built from them
by `convert_event_generators()`.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from collections import namedtuple
from copy import deepcopy
import logging
import numbers

import neo
import quantities as pq

from .connections import CellMember
from .errors import GeneratorValidationError
from .schedules import Schedule
from .utility import is_sequencelike

logger = logging.getLogger("PyRecipe")


SpikeEvent = namedtuple("SpikeEvent", ["target", "time", "weight"])


class EventGenerator(object):
    """
    Describes a source of events, to be delivered to a target on the cell the
    generator is attached to.

    Arguments:
        `target`:
            the target synapse, as a (gid, index) pair. Only the index is
            used; the gid is that of the cell the generator is attached to.
        `weight`:
            the weight of events to deliver.
        `schedule`:
            a `Schedule` giving the times at which events are delivered.
    """

    def __init__(self, target, weight, schedule):
        self.target = target
        self.weight = weight
        self.schedule = schedule

    @property
    def target(self):
        """The target synapse, a (gid, index) pair."""
        return self._target

    @target.setter
    def target(self, value):
        self._target = CellMember.from_value(value)

    @property
    def weight(self):
        """The weight of the events."""
        return self._weight

    @weight.setter
    def weight(self, value):
        self._weight = float(value)

    @property
    def schedule(self):
        """The schedule giving the event times."""
        return self._schedule

    @schedule.setter
    def schedule(self, value):
        if not isinstance(value, Schedule):
            raise TypeError("schedule must be a Schedule, not %s" % type(value).__name__)
        self._schedule = value

    def __str__(self):
        # also used for half-initialised subclasses in error messages
        return "<event generator: target %s, weight %s, schedule %s>" % (
            getattr(self, "target", None), getattr(self, "weight", None),
            getattr(self, "schedule", None))

    __repr__ = __str__


class ScheduleGenerator(object):
    """An event generator bound to a concrete target, owned by the engine."""

    def __init__(self, target, weight, schedule):
        self.target = CellMember.from_value(target)
        self.weight = weight
        self.schedule = schedule

    def events(self, t0, t1):
        """Return the events with delivery times in the interval [t0, t1)."""
        return [SpikeEvent(self.target, time, self.weight)
                for time in self.schedule.events(t0, t1)]

    def reset(self):
        self.schedule.reset()

    def spiketrain(self, t_start, t_stop):
        """Return the event times in [t_start, t_stop) as a neo.SpikeTrain."""
        times = self.schedule.events(t_start, t_stop)
        return neo.SpikeTrain(times, t_start=t_start, t_stop=t_stop, units=pq.ms,
                              source_id=self.target.gid, target_index=self.target.index)

    def __str__(self):
        return "<schedule generator: target %s, weight %g, schedule %s>" % (
            self.target, self.weight, self.schedule)

    __repr__ = __str__


def convert_event_generators(gid, generators):
    """
    Convert the event generators returned by a recipe for cell `gid` into
    engine-native schedule generators, preserving their order.

    Raises GeneratorValidationError if any item is not an `EventGenerator`
    with a target, a numeric weight and a schedule; in that case nothing is
    returned. Sets are rejected, as they have no order.
    """
    if generators is None:
        return []
    if not is_sequencelike(generators):
        raise GeneratorValidationError(gid, generators)
    converted = []
    for position, g in enumerate(generators):
        if not (isinstance(g, EventGenerator)
                and isinstance(getattr(g, "target", None), CellMember)
                and isinstance(getattr(g, "weight", None), numbers.Real)
                and isinstance(getattr(g, "schedule", None), Schedule)):
            raise GeneratorValidationError(gid, g, position)
        # the engine takes its own copy of the schedule, which carries state
        converted.append(
            ScheduleGenerator(CellMember(gid, g.target.index), g.weight, deepcopy(g.schedule))
        )
    logger.debug("Converted %d event generators for gid %d", len(converted), gid)
    return converted
