"""Exceptions raised by epsgeom constructors and validating wrappers."""

from __future__ import annotations


class GeometryError(ValueError):
    """An argument is not a valid geometric value.

    Raised for negative radii, polygons with fewer than three
    vertices, non-numeric coordinates and the like.  Subclasses
    ``ValueError`` so callers that already guard against bad values
    keep working.
    """


class DegenerateGeometryError(GeometryError):
    """The inputs are well-formed numbers but describe a degenerate
    figure, such as a plane through three collinear points."""


__all__ = ['GeometryError', 'DegenerateGeometryError']
