# core/errors.py


class SlicerError(Exception):
    """Base class for every error raised by the slicer."""


class FileAccessError(SlicerError):
    """An input file could not be read or the report could not be written."""


class PlaneListFormatError(FileAccessError):
    """The centreline file does not hold a count followed by that many 6-real records."""


class InvalidMeshError(SlicerError):
    """The mesh could not be parsed, is empty or is not a closed surface."""


class DegenerateNormalError(SlicerError, ValueError):
    """A plane or loop normal has zero length."""


class IntersectorFailure(SlicerError):
    """The plane-mesh intersector could not produce loops for a plane."""


class NoIntersection(IntersectorFailure):
    """Raised by an intersector to state that the plane misses the mesh."""


class NonSimplePolygonWarning(UserWarning):
    """
    Attached to a loop whose projection self-intersects.
    The area is still reported, but it may not be well-defined.
    """

    def __init__(self, plane_index: int, loop_index: int):
        self.plane_index = plane_index
        self.loop_index = loop_index
        super().__init__(
            f"Plane {plane_index}, loop {loop_index}: polygon is not simple, "
            f"its area may not be well-defined"
        )

    def __reduce__(self):
        return type(self), (self.plane_index, self.loop_index)
