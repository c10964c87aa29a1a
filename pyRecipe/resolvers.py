# encoding: utf-8
"""
Resolution of the loosely-typed objects returned by a recipe into the
concrete descriptions used by the engine.

Functions:
    resolve_cell_description()  - cell description -> CellDescription
    resolve_global_properties() - global properties -> CableGlobalProperties or None

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from copy import deepcopy
import logging

from .cells import (CellKind, CellDescription, CableCell, LIFCell, SpikeSourceCell,
                    BenchmarkCell, CableGlobalProperties)
from .errors import DescriptionMismatchError, PropertiesMismatchError

logger = logging.getLogger("PyRecipe")

# order in which cell descriptions are matched
description_types = (
    (CellKind.cable, CableCell),
    (CellKind.lif, LIFCell),
    (CellKind.spike_source, SpikeSourceCell),
    (CellKind.benchmark, BenchmarkCell),
)

# cell kinds which have global properties
global_properties_types = {
    CellKind.cable: CableGlobalProperties,
}


def resolve_cell_description(gid, obj):
    """
    Return a CellDescription holding a copy of `obj`, the object returned by
    `recipe.cell_description(gid)`.

    Raises DescriptionMismatchError if `obj` is not one of the known cell
    descriptions.
    """
    for kind, cls in description_types:
        if isinstance(obj, cls):
            logger.debug("Resolved description of gid %d as %s", gid, kind)
            return CellDescription(kind, deepcopy(obj))
    raise DescriptionMismatchError(gid, obj)


def resolve_global_properties(kind, obj):
    """
    Return a copy of `obj`, the object returned by
    `recipe.global_properties(kind)`, or None for cell kinds that have no
    global properties.

    Raises PropertiesMismatchError if `kind` has global properties and `obj`
    is not of the right type.
    """
    kind = CellKind(kind)
    try:
        cls = global_properties_types[kind]
    except KeyError:
        if obj is not None:
            logger.warning("Ignoring global properties %s supplied for %s, which has none",
                           obj, kind)
        return None
    if not isinstance(obj, cls):
        raise PropertiesMismatchError(kind, obj)
    return deepcopy(obj)
