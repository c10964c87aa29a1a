# encoding: utf-8
"""
Point-to-point connections and gap junctions between cells.

Classes:
    CellMember            - an endpoint (gid, index) on a cell
    CellConnection        - engine-native, immutable form of a connection
    Connection            - a connection as built by a recipe, with a guarded
                            delay
    GapJunctionConnection - a bidirectional electrical coupling between two
                            gap junction sites

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from collections import namedtuple
import numbers

from .errors import ConstraintViolationError


class CellMember(namedtuple("CellMember", ["gid", "index"])):
    """
    Identifies a specific source, target or gap junction site on a cell:
    `gid` is the global identifier of the cell, `index` the local index of the
    site on that cell.
    """
    __slots__ = ()

    def __new__(cls, gid, index):
        for name, value in (("gid", gid), ("index", index)):
            if not isinstance(value, numbers.Integral) or isinstance(value, bool):
                raise TypeError("cell member %s must be an integer, not %s"
                                % (name, type(value).__name__))
            if value < 0:
                raise ValueError("cell member %s must be non-negative (got %d)" % (name, value))
        return super(CellMember, cls).__new__(cls, int(gid), int(index))

    @classmethod
    def from_value(cls, value):
        """Build a CellMember from another CellMember or a (gid, index) pair."""
        if isinstance(value, cls):
            return value
        try:
            gid, index = value
        except (TypeError, ValueError):
            raise TypeError("a cell member must be a (gid, index) pair, not %r" % (value,))
        return cls(gid, index)

    def __str__(self):
        return "(%d,%d)" % (self.gid, self.index)


CellConnection = namedtuple("CellConnection", ["source", "destination", "weight", "delay"])
CellConnection.__doc__ = "Engine-native connection. Built with `Connection.to_cell_connection()`."


def check_delay(delay):
    """Raise ConstraintViolationError unless `delay` is strictly positive."""
    if not delay > 0:  # also rejects NaN
        raise ConstraintViolationError("connection delay must be positive", delay)


class Connection(object):
    """
    Describes a connection between two cells: a pre-synaptic source and a
    post-synaptic destination. The source is typically a spike detector on the
    pre-synaptic cell, and the destination a synapse on the post-synaptic cell.

    Arguments:
        `source`:
            the source end point of the connection, a (gid, index) pair
            (default (0,0)).
        `dest`:
            the destination end point of the connection, a (gid, index) pair
            (default (0,0)).
        `weight`:
            the weight delivered to the target synapse (unit defined by the
            type of synapse target, default 0.).
        `delay`:
            the delay of the connection (unit: ms). Must be positive.
    """

    def __init__(self, source=(0, 0), dest=(0, 0), weight=0.0, delay=None):
        if delay is None:
            raise TypeError("Connection() missing required argument: 'delay'")
        self.source = source
        self.destination = dest
        self.weight = weight
        self.delay = delay

    @property
    def source(self):
        """The source end point of the connection."""
        return self._source

    @source.setter
    def source(self, value):
        self._source = CellMember.from_value(value)

    @property
    def destination(self):
        """The destination end point of the connection."""
        return self._destination

    @destination.setter
    def destination(self, value):
        self._destination = CellMember.from_value(value)

    dest = destination

    @property
    def weight(self):
        """The weight of the connection."""
        return self._weight

    @weight.setter
    def weight(self, value):
        self._weight = float(value)

    @property
    def delay(self):
        """The delay time of the connection (unit: ms). Must be positive."""
        return self._delay

    @delay.setter
    def delay(self, value):
        value = float(value)
        check_delay(value)
        self._delay = value

    def to_cell_connection(self):
        """Return the engine-native form of this connection."""
        return CellConnection(self.source, self.destination, self.weight, self.delay)

    def __eq__(self, other):
        if not isinstance(other, Connection):
            return NotImplemented
        return self.to_cell_connection() == other.to_cell_connection()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __str__(self):
        return "connection: %s -> %s, delay %g, weight %g" % (
            self.source, self.destination, self.delay, self.weight)

    __repr__ = __str__


class GapJunctionConnection(object):
    """
    Describes a gap junction between two gap junction sites. Gap junctions are
    symmetric: `local` and `peer` are the two ends of a single electrical
    coupling.

    Arguments:
        `local`:
            one half of the gap junction connection (default (0,0)).
        `peer`:
            other half of the gap junction connection (default (0,0)).
        `ggap`:
            gap junction conductance (unit: μS, default 0.).
    """

    def __init__(self, local=(0, 0), peer=(0, 0), ggap=0.0):
        self.local = local
        self.peer = peer
        self.ggap = ggap

    @property
    def local(self):
        """One half of the gap junction connection."""
        return self._local

    @local.setter
    def local(self, value):
        self._local = CellMember.from_value(value)

    @property
    def peer(self):
        """Other half of the gap junction connection."""
        return self._peer

    @peer.setter
    def peer(self, value):
        self._peer = CellMember.from_value(value)

    @property
    def ggap(self):
        """Gap junction conductance (unit: μS)."""
        return self._ggap

    @ggap.setter
    def ggap(self, value):
        # no constraint on the sign of the conductance
        self._ggap = float(value)

    def __eq__(self, other):
        if not isinstance(other, GapJunctionConnection):
            return NotImplemented
        return (self.local, self.peer, self.ggap) == (other.local, other.peer, other.ggap)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __str__(self):
        return "gap junction: %s <-> %s, conductance %g" % (self.local, self.peer, self.ggap)

    __repr__ = __str__
