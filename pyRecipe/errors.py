# encoding: utf-8
"""
Defines exceptions for the PyRecipe API

    RecipeError
    DescriptionMismatchError
    PropertiesMismatchError
    GeneratorValidationError
    ConstraintViolationError
    InvalidConnectionError
    CellKindMismatchError
    InvalidQueryResultError

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""


class RecipeError(Exception):
    """Base class for errors raised while marshalling a recipe."""
    pass


class DescriptionMismatchError(RecipeError, TypeError):
    """
    The object returned by `recipe.cell_description()` does not describe a
    known cell type.
    """

    def __init__(self, gid, value):
        RecipeError.__init__(self, gid, value)
        self.gid = gid
        self.value = value
        self.rendered = str(value)

    def __str__(self):
        return ('recipe.cell_description returned "%s" for gid %d which does '
                'not describe a known cell type' % (self.rendered, self.gid))


class PropertiesMismatchError(RecipeError, TypeError):
    """
    The object returned by `recipe.global_properties()` is not a global
    properties description for the requested cell kind.
    """

    def __init__(self, kind, value):
        RecipeError.__init__(self, kind, value)
        self.kind = kind
        self.value = value
        self.rendered = str(value)

    def __str__(self):
        return ('recipe.global_properties returned "%s" for cell kind %s which '
                'does not describe a known global property description'
                % (self.rendered, self.kind))


class GeneratorValidationError(RecipeError, TypeError):
    """The recipe supplied something other than an event generator."""

    def __init__(self, gid, value, position=None):
        RecipeError.__init__(self, gid, value, position)
        self.gid = gid
        self.value = value
        self.position = position
        self.rendered = str(value)

    def __str__(self):
        if self.position is None:
            return ("recipe supplied an invalid list of event generators for "
                    "gid %d: %s" % (self.gid, self.rendered))
        return ("recipe supplied an invalid event generator for gid %d "
                "(position %d): %s" % (self.gid, self.position, self.rendered))


class ConstraintViolationError(RecipeError, ValueError):
    """A value violates an invariant of the object it was given to."""

    def __init__(self, constraint, value):
        RecipeError.__init__(self, constraint, value)
        self.constraint = constraint
        self.value = value

    def __str__(self):
        return "%s (got %s)" % (self.constraint, self.value)


class InvalidConnectionError(RecipeError, TypeError):
    """
    The recipe supplied something other than a connection or gap junction in
    a list of connections.
    """

    def __init__(self, gid, value, expected="connection"):
        RecipeError.__init__(self, gid, value, expected)
        self.gid = gid
        self.value = value
        self.rendered = str(value)
        self.expected = expected

    def __str__(self):
        return ("recipe supplied an invalid %s for gid %d: %s"
                % (self.expected, self.gid, self.rendered))


class CellKindMismatchError(RecipeError):
    """`recipe.cell_kind()` disagrees with the description of the same cell."""

    def __init__(self, gid, kind, description_kind):
        RecipeError.__init__(self, gid, kind, description_kind)
        self.gid = gid
        self.kind = kind
        self.description_kind = description_kind

    def __str__(self):
        return ("recipe.cell_kind returned %s for gid %d, but the cell "
                "description is of kind %s"
                % (self.kind, self.gid, self.description_kind))


class InvalidQueryResultError(RecipeError, ValueError):
    """
    A recipe query returned a value of the wrong type, e.g. a negative count
    or something that is not a cell kind.
    """

    def __init__(self, query, gid, value, expected):
        RecipeError.__init__(self, query, gid, value, expected)
        self.query = query
        self.gid = gid
        self.value = value
        self.rendered = repr(value)
        self.expected = expected

    def __str__(self):
        if self.gid is None:
            return "recipe.%s returned %s, expected %s" % (self.query, self.rendered, self.expected)
        return ("recipe.%s returned %s for gid %d, expected %s"
                % (self.query, self.rendered, self.gid, self.expected))
